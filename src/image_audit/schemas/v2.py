"""Unikorn image metadata schema, version 2."""

NAMESPACE_PREFIX = "unikorn:"

DOCUMENTATION_URL = (
    "https://github.com/unikorn-cloud/specifications/blob/main/"
    "specifications/providers/openstack/flavors_and_images.md"
)

SCHEMA_V2 = """
{
  "type": "object",
  "required": [
    "unikorn:os:kernel",
    "unikorn:os:family",
    "unikorn:os:distro",
    "unikorn:os:version",
    "unikorn:virtualization"
  ],
  "properties": {
    "unikorn:os:kernel": {
      "type": "string",
      "enum": ["linux"]
    },
    "unikorn:os:family": {
      "type": "string",
      "enum": ["debian", "redhat"]
    },
    "unikorn:os:distro": {
      "type": "string",
      "enum": ["ubuntu", "rocky"]
    },
    "unikorn:os:variant": {
      "type": "string"
    },
    "unikorn:os:codename": {
      "type": "string"
    },
    "unikorn:os:version": {
      "type": "string"
    },
    "unikorn:package:kubernetes": {
      "type": "string"
    },
    "unikorn:package:slurmd": {
      "type": "string"
    },
    "unikorn:gpu_vendor": {
      "type": "string",
      "enum": ["AMD", "NVIDIA"]
    },
    "unikorn:gpu_models": {
      "type": "string"
    },
    "unikorn:gpu_driver": {
      "type": "string"
    },
    "unikorn:virtualization": {
      "type": "string",
      "enum": ["any", "baremetal", "virtualized"]
    },
    "unikorn:digest": {
      "type": "string"
    }
  }
}
"""
