"""Texture slots addressed by integer handles, with reuse of freed slots."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import List, Optional, Union

DEFAULT_DIRECTORY = "Resources/"
NUM_DESCRIPTORS = 1024


def decode_utf8(data: Union[bytes, bytearray, str]) -> str:
    """Decode UTF-8 bytes to text; malformed sequences become U+FFFD."""
    if isinstance(data, str):
        return data
    if not data:
        return ""
    return bytes(data).decode("utf-8", errors="replace")


class UseTable:
    """Fixed-size bit table recording which slots are in use."""

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError("size must not be negative")
        self.size = size
        self._bits = 0

    def _check(self, index: int) -> None:
        if not 0 <= index < self.size:
            raise IndexError(f"bit index {index} out of range 0..{self.size - 1}")

    def find_first(self) -> int:
        """Index of the first free slot; equals ``size`` when every slot is used."""
        bits = self._bits
        return (~bits & (bits + 1)).bit_length() - 1

    def set(self, index: int, value: bool = True) -> None:
        self._check(index)
        if value:
            self._bits |= 1 << index
        else:
            self._bits &= ~(1 << index)

    def reset(self, index: Optional[int] = None) -> None:
        """Clear one slot, or every slot when no index is given."""
        if index is None:
            self._bits = 0
        else:
            self.set(index, False)

    def test(self, index: int) -> bool:
        self._check(index)
        return bool(self._bits >> index & 1)


@dataclass
class Texture:
    """A loaded texture file."""

    name: str
    path: str
    data: bytes


class TextureManager:
    """Loads texture files into numbered slots, sharing repeated loads."""

    def __init__(
        self, directory_path: str = DEFAULT_DIRECTORY, capacity: int = NUM_DESCRIPTORS
    ) -> None:
        self.directory_path = directory_path
        self.capacity = capacity
        self._textures: List[Optional[Texture]] = []
        self._use_table = UseTable(capacity)
        self.reset_all()

    def reset_all(self) -> None:
        """Forget every loaded texture."""
        self._textures = [None] * self.capacity
        self._use_table.reset()

    def full_path(self, file_name: str) -> str:
        """Path a file name is read from: "./" names as given, others under the directory."""
        current_relative = len(file_name) > 2 and file_name.startswith("./")
        return file_name if current_relative else self.directory_path + file_name

    def load(self, file_name: str) -> int:
        """Load a texture file and return its handle; a name already loaded is reused."""
        if not file_name:
            raise ValueError("texture file name must not be empty")
        for handle, texture in enumerate(self._textures):
            if texture is not None and texture.name == file_name:
                return handle
        handle = self._use_table.find_first()
        if handle >= self.capacity:
            raise RuntimeError("no free texture slot left")
        path = self.full_path(file_name)
        if not os.path.isfile(path):
            raise FileNotFoundError(f"texture '{file_name}' could not be loaded from {path}")
        with open(path, "rb") as handle_file:
            data = handle_file.read()
        self._textures[handle] = Texture(name=file_name, path=path, data=data)
        self._use_table.set(handle)
        return handle

    def unload(self, handle: int) -> bool:
        """Free a slot; False when the handle is out of range."""
        if not 0 <= handle < self.capacity:
            return False
        if self._textures[handle] is None:
            raise ValueError(f"texture handle {handle} is not loaded")
        self._textures[handle] = None
        self._use_table.reset(handle)
        return True

    def __getitem__(self, handle: int) -> Texture:
        if not 0 <= handle < self.capacity:
            raise IndexError(f"texture handle {handle} out of range")
        texture = self._textures[handle]
        if texture is None:
            raise KeyError(handle)
        return texture

    def __contains__(self, file_name: object) -> bool:
        return any(t is not None and t.name == file_name for t in self._textures)