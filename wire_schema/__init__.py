"""Composable schemas that validate values and (de)serialize them with MessagePack."""

from .builders import bool_, bytes_, extend, list_, num, optional, record, str_, union
from .codec import DEFAULT_CODEC, Codec, MsgpackCodec
from .exceptions import (
    DecodeError,
    LiteralMismatch,
    MissingDiscriminator,
    NoMatchingBranch,
    NotAnArray,
    NotAnObject,
    SchemaDefinitionError,
    SchemaError,
    TypeMismatch,
    ValidationError,
)
from .models import (
    BoolSpec,
    BytesSpec,
    ExtendSpec,
    ListSpec,
    NumSpec,
    OptionalSpec,
    RecordLike,
    RecordSpec,
    SchemaSpec,
    StrSpec,
    UnionSpec,
)

__version__ = "0.1.0"
