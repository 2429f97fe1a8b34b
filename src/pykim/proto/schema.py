"""
Kythe protobuf schema used by inline metadata.

The messages mirror ``kythe/proto/storage.proto`` (``VName``) and
``kythe/proto/metadata.proto`` (``MappingRule``, ``GeneratedCodeInfo``).
They are registered in a private descriptor pool so that they never clash
with Kythe's own generated modules if those are installed as well.
Field names and numbers must stay wire compatible with the upstream files.
"""

from __future__ import annotations

from google.protobuf import descriptor_pb2, descriptor_pool, message_factory

__all__ = ["GeneratedCodeInfo", "MappingRule", "VName", "POOL"]

_Field = descriptor_pb2.FieldDescriptorProto

STORAGE_FILE = "kythe/proto/storage.proto"
METADATA_FILE = "kythe/proto/metadata.proto"


def _add_field(
    message: descriptor_pb2.DescriptorProto,
    name: str,
    number: int,
    field_type: int,
    type_name: str | None = None,
    repeated: bool = False,
) -> None:
    field = message.field.add(name=name, number=number, type=field_type)
    field.label = _Field.LABEL_REPEATED if repeated else _Field.LABEL_OPTIONAL
    if type_name is not None:
        field.type_name = type_name


def _add_enum(
    message: descriptor_pb2.DescriptorProto, name: str, values: list[str]
) -> None:
    enum = message.enum_type.add(name=name)
    for number, value in enumerate(values):
        enum.value.add(name=value, number=number)


def _storage_file() -> descriptor_pb2.FileDescriptorProto:
    fdp = descriptor_pb2.FileDescriptorProto(
        name=STORAGE_FILE, package="kythe.proto", syntax="proto3"
    )
    vname = fdp.message_type.add(name="VName")
    for number, name in enumerate(
        ("signature", "corpus", "root", "path", "language"), start=1
    ):
        _add_field(vname, name, number, _Field.TYPE_STRING)
    return fdp


def _metadata_file() -> descriptor_pb2.FileDescriptorProto:
    fdp = descriptor_pb2.FileDescriptorProto(
        name=METADATA_FILE,
        package="kythe.proto.metadata",
        syntax="proto3",
        dependency=[STORAGE_FILE],
    )

    rule = fdp.message_type.add(name="MappingRule")
    _add_enum(rule, "Type", ["NONE", "NOP", "ANCHOR_DEFINES", "ANCHOR_ANCHOR"])
    _add_enum(rule, "Semantic", ["SEMA_NONE", "SEMA_WRITE", "SEMA_READ_WRITE"])
    _add_field(
        rule, "type", 1, _Field.TYPE_ENUM, ".kythe.proto.metadata.MappingRule.Type"
    )
    _add_field(rule, "edge", 2, _Field.TYPE_STRING)
    _add_field(rule, "vname", 3, _Field.TYPE_MESSAGE, ".kythe.proto.VName")
    _add_field(rule, "begin", 4, _Field.TYPE_UINT32)
    _add_field(rule, "end", 5, _Field.TYPE_UINT32)
    _add_field(rule, "source_vname", 6, _Field.TYPE_MESSAGE, ".kythe.proto.VName")
    _add_field(rule, "source_begin", 7, _Field.TYPE_UINT32)
    _add_field(rule, "source_end", 8, _Field.TYPE_UINT32)
    _add_field(rule, "target_begin", 9, _Field.TYPE_UINT32)
    _add_field(rule, "target_end", 10, _Field.TYPE_UINT32)
    _add_field(
        rule,
        "semantic",
        11,
        _Field.TYPE_ENUM,
        ".kythe.proto.metadata.MappingRule.Semantic",
    )

    info = fdp.message_type.add(name="GeneratedCodeInfo")
    _add_enum(info, "Type", ["NONE", "KYTHE0"])
    _add_field(
        info,
        "type",
        1,
        _Field.TYPE_ENUM,
        ".kythe.proto.metadata.GeneratedCodeInfo.Type",
    )
    _add_field(
        info,
        "meta",
        2,
        _Field.TYPE_MESSAGE,
        ".kythe.proto.metadata.MappingRule",
        repeated=True,
    )
    return fdp


POOL = descriptor_pool.DescriptorPool()
POOL.AddSerializedFile(_storage_file().SerializeToString())
POOL.AddSerializedFile(_metadata_file().SerializeToString())

VName = message_factory.GetMessageClass(
    POOL.FindMessageTypeByName("kythe.proto.VName")
)
MappingRule = message_factory.GetMessageClass(
    POOL.FindMessageTypeByName("kythe.proto.metadata.MappingRule")
)
GeneratedCodeInfo = message_factory.GetMessageClass(
    POOL.FindMessageTypeByName("kythe.proto.metadata.GeneratedCodeInfo")
)
