"""Texture handle allocation and name bookkeeping."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

_BITS_PER_WORD = 64


class HandleBitset:
    """A fixed-size set of bits that tracks which handles are in use.

    After a full reset the first ``reserved`` bits are marked as used, so the
    first free handle starts past them.
    """

    RESERVED_BITS: ClassVar[int] = 3 * _BITS_PER_WORD

    def __init__(self, size: int, reserved: int | None = None) -> None:
        if size < 0:
            raise ValueError("bitset size must not be negative")
        self.size = size
        word_count = 1 if size == 0 else (size - 1) // _BITS_PER_WORD + 1
        self.capacity = word_count * _BITS_PER_WORD
        self.reserved = self.RESERVED_BITS if reserved is None else reserved
        if not 0 <= self.reserved <= self.capacity:
            raise ValueError("reserved bits exceed the bitset's capacity")
        self._bits = 0
        self.reset_all()

    def _check(self, index: int) -> None:
        if not 0 <= index < self.size:
            raise IndexError(f"bit index {index} out of range 0..{self.size - 1}")

    def find_first(self) -> int:
        """Return the index of the first clear bit, or the capacity when none is clear."""
        free = ~self._bits & ((1 << self.capacity) - 1)
        if not free:
            return self.capacity
        return (free & -free).bit_length() - 1

    def set(self, index: int, value: bool = True) -> None:
        self._check(index)
        if value:
            self._bits |= 1 << index
        else:
            self._bits &= ~(1 << index)

    def reset(self, index: int) -> None:
        self.set(index, False)

    def reset_all(self) -> None:
        """Clear every bit, then mark the reserved range as used."""
        self._bits = (1 << self.reserved) - 1

    def test(self, index: int) -> bool:
        self._check(index)
        return bool(self._bits >> index & 1)


@dataclass
class _Texture:
    name: str = ""
    path: str = ""


class TextureManager:
    """Hands out texture handles by file name and frees them again."""

    NUM_DESCRIPTORS: ClassVar[int] = 256

    def __init__(self, directory_path: str = "Resources/") -> None:
        self.directory_path = directory_path
        self._textures = [_Texture() for _ in range(self.NUM_DESCRIPTORS)]
        self._use_table = HandleBitset(self.NUM_DESCRIPTORS)

    def __len__(self) -> int:
        return sum(1 for texture in self._textures if texture.name)

    def reset_all(self) -> None:
        """Forget every loaded texture."""
        for texture in self._textures:
            texture.name = ""
            texture.path = ""
        self._use_table.reset_all()

    def full_path(self, file_name: str) -> str:
        """Return the path a file name resolves to; names starting with ./ are kept as is."""
        if len(file_name) > 2 and file_name.startswith("./"):
            return file_name
        return self.directory_path + file_name

    def load(self, file_name: str) -> int:
        """Return the handle for file_name, registering it on first use."""
        if not file_name:
            raise ValueError("texture file name must not be empty")
        for handle, texture in enumerate(self._textures):
            if texture.name == file_name:
                return handle
        handle = self._use_table.find_first()
        if handle >= self.NUM_DESCRIPTORS:
            raise RuntimeError("no free texture handles left")
        texture = self._textures[handle]
        texture.name = file_name
        texture.path = self.full_path(file_name)
        self._use_table.set(handle)
        return handle

    def unload(self, handle: int) -> bool:
        """Free a handle; False when it is out of range, ValueError when nothing is loaded there."""
        if not 0 <= handle < len(self._textures):
            return False
        texture = self._textures[handle]
        if not texture.name:
            raise ValueError(f"no texture is loaded at handle {handle}")
        texture.name = ""
        texture.path = ""
        self._use_table.reset(handle)
        return True

    def name_of(self, handle: int) -> str:
        """Return the file name loaded at handle, or an empty string for a free slot."""
        if not 0 <= handle < len(self._textures):
            raise IndexError(f"texture handle {handle} out of range")
        return self._textures[handle].name

    def path_of(self, handle: int) -> str:
        if not 0 <= handle < len(self._textures):
            raise IndexError(f"texture handle {handle} out of range")
        return self._textures[handle].path