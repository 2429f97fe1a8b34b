"""
Protobuf message classes for Kythe metadata.
"""

from .schema import GeneratedCodeInfo, MappingRule, VName

__all__ = ["GeneratedCodeInfo", "MappingRule", "VName"]
