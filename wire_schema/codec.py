# Copyright 2026 TIER IV, inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Binary codecs used by schema nodes to (de)serialize validated values."""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any

import msgpack
from msgpack.exceptions import UnpackException

from .exceptions import DecodeError

logger = logging.getLogger(__name__)


class Codec(ABC):
    """Abstract pack/unpack pair operating on plain nested values."""

    @abstractmethod
    def pack(self, value: Any) -> bytes:
        """Encode an already-validated plain value."""

    @abstractmethod
    def unpack(self, data: bytes) -> Any:
        """Decode bytes produced by :meth:`pack`.

        Raises:
            DecodeError: If the payload is malformed.
        """


@dataclass(frozen=True)
class MsgpackCodec(Codec):
    """MessagePack codec.

    Strings and byte blobs are kept apart on the wire (``bin`` type), maps
    decode to ``dict`` and arrays to ``list``. Floats are always written as
    float64 unless ``use_single_float`` is set, so NaN and the infinities
    survive a round trip.
    """

    use_single_float: bool = False
    strict_map_key: bool = True

    def pack(self, value: Any) -> bytes:
        data = msgpack.packb(value, use_bin_type=True, use_single_float=self.use_single_float)
        logger.debug(f"Packed {type(value).__name__} into {len(data)} bytes")
        return data

    def unpack(self, data: bytes) -> Any:
        try:
            return msgpack.unpackb(
                data,
                raw=False,
                use_list=True,
                strict_map_key=self.strict_map_key,
            )
        except (ValueError, TypeError, UnpackException) as exc:
            raise DecodeError(f"Failed to decode MessagePack payload: {exc}") from exc


DEFAULT_CODEC = MsgpackCodec()
