#!/usr/bin/env python
# -*- coding: utf-8 -*-

import logging

import numpy as np

from pyradix.base import DataSize, Radix, fits_signed, strip_radix_prefix
from pyradix.flowint import IFLOW_CLASSES, IFlow128

'''
A signed integer of one of five fixed widths, with the width carried as an
explicit tag next to the value. Every operation is done once, generically,
on the fixed-width primitive of the active width.
'''

TAG_NAMES = {
    DataSize.BYTE: 'Byte',
    DataSize.WORD: 'Word',
    DataSize.DWORD: 'DWord',
    DataSize.QWORD: 'QWord',
    DataSize.OWORD: 'OWord',
}

FORMAT_RADIXES = {
    'b': Radix.BINARY,
    'o': Radix.OCTAL,
    'd': Radix.DECIMAL,
    'x': Radix.HEX,
    'X': Radix.HEX,
}


class GenericNum:
    '''
    Tagged union of 8, 16, 32, 64 and 128-bit two's-complement integers. Exactly
    one width is active at a time; width changes always build a new number. Only
    shl(), shr() and flip_bit() change a number in place.
    '''

    def __init__(self, num=0, data_size=DataSize.BYTE):
        '''
        :param num: Signed integer value, which must fit in the width
        :param data_size: Width tag. Defaults to a byte, so GenericNum() is a zero byte.
        '''
        self._data_size = DataSize(data_size)
        self._prim = IFLOW_CLASSES[self._data_size.bits](num)

    @classmethod
    def byte(cls, num):
        return cls(num, DataSize.BYTE)

    @classmethod
    def word(cls, num):
        return cls(num, DataSize.WORD)

    @classmethod
    def dword(cls, num):
        return cls(num, DataSize.DWORD)

    @classmethod
    def qword(cls, num):
        return cls(num, DataSize.QWORD)

    @classmethod
    def oword(cls, num):
        return cls(num, DataSize.OWORD)

    @classmethod
    def use_least_size(cls, num):
        '''
        Number in the narrowest width that holds the integer exactly, trying 8, 16,
        32, 64 and finally 128 bits.
        '''
        data_size = DataSize.least(int(num))
        assert data_size is not None, f"Value {num} out-of-range for signed 128 bits"
        return cls(num, data_size)

    @property
    def num(self):
        return self._prim.num

    @property
    def num_bits(self):
        return self._data_size.bits

    def data_size(self):
        return self._data_size

    def copy(self):
        return GenericNum(self.num, self._data_size)

    def __copy__(self):
        return self.copy()

    '''
    Parsing. Text is always parsed as a 128-bit signed integer first, then stored
    in the narrowest width that holds it.
    '''

    @classmethod
    def from_base(cls, text, radix):
        '''
        Parse text in a certain radix, or return None if the text is malformed or
        does not fit in 128 bits. Binary, octal and hex text is a bit pattern, so
        "ff" is 255 (a word), while a full 128-bit pattern of ones is -1 (a byte).
        '''
        prim = IFlow128.from_radix(text, Radix(radix))
        if prim is None:
            return None
        gnum = cls.use_least_size(prim.num)
        logging.debug(f"Parsed '{text}' as {gnum!r}.")
        return gnum

    @classmethod
    def from_binary(cls, text):
        return cls.from_base(text, Radix.BINARY)

    @classmethod
    def from_octal(cls, text):
        return cls.from_base(text, Radix.OCTAL)

    @classmethod
    def from_decimal(cls, text):
        return cls.from_base(text, Radix.DECIMAL)

    @classmethod
    def from_hex(cls, text):
        return cls.from_base(text, Radix.HEX)

    @classmethod
    def parse_literal(cls, text, radix):
        '''
        Like from_base(), but tolerates surrounding whitespace and a leading "0x",
        "0o" or "0b" prefix matching the radix.
        '''
        radix = Radix(radix)
        return cls.from_base(strip_radix_prefix(text, radix), radix)

    # rendering

    def to_base(self, radix, upper=False):
        '''
        Text in a certain radix. Binary, octal and hex render the full bit pattern
        zero-padded to the width; decimal is the plain signed value.
        '''
        return self._prim.to_radix(Radix(radix), upper=upper)

    def to_binary(self):
        return self.to_base(Radix.BINARY)

    def to_octal(self):
        return self.to_base(Radix.OCTAL)

    def to_decimal(self):
        return self.to_base(Radix.DECIMAL)

    def to_hex_lower(self):
        return self.to_base(Radix.HEX)

    def to_hex_upper(self):
        return self.to_base(Radix.HEX, upper=True)

    def __format__(self, format_spec):
        if format_spec == '':
            return self.to_decimal()
        if format_spec in FORMAT_RADIXES:
            return self.to_base(FORMAT_RADIXES[format_spec], upper=format_spec == 'X')
        return self.num.__format__(format_spec)

    def __str__(self):
        return self.to_decimal()

    def __repr__(self):
        return f"{TAG_NAMES[self._data_size]}({self.num})"

    '''
    Width conversion. Total between every pair of widths: widening sign-extends,
    narrowing keeps the low-order bits.
    '''

    def to_size(self, data_size):
        data_size = DataSize(data_size)
        return GenericNum(self._prim.cast(data_size.bits).num, data_size)

    def to_byte(self):
        return self.to_size(DataSize.BYTE)

    def to_word(self):
        return self.to_size(DataSize.WORD)

    def to_dword(self):
        return self.to_size(DataSize.DWORD)

    def to_qword(self):
        return self.to_size(DataSize.QWORD)

    def to_oword(self):
        return self.to_size(DataSize.OWORD)

    # bits

    def sign_bit(self):
        return self._prim.get_bit(self.num_bits - 1)

    def is_zero(self):
        return self._prim.pattern == 0

    def get_bit(self, idx):
        return self._prim.get_bit(idx)

    def flip_bit(self, idx):
        self._prim = self._prim.flip_bit(idx)

    def shl(self):
        self._prim = self._prim.shl()

    def shr(self):
        self._prim = self._prim.shr()

    def bits(self):
        '''
        All bits of the width as a boolean array, least significant bit first, so
        that bits()[i] == get_bit(i).
        '''
        pattern = self._prim.pattern.to_bytes(self._data_size.value, 'little')
        return np.unpackbits(np.frombuffer(pattern, dtype=np.uint8), bitorder='little').astype(np.bool_)

    def __neg__(self):
        '''
        Wrapping negation, so the most negative number of a width negates to itself.
        '''
        return GenericNum((-self._prim).num, self._data_size)

    def __int__(self):
        return self.num

    def __index__(self):
        return self.num

    '''
    Two generic numbers are equal only with the same width and value; ordering
    only looks at the value. Against a plain Python integer both compare the
    value. Anything else is not comparable.
    '''

    def __eq__(self, o):
        if isinstance(o, GenericNum):
            return self._data_size is o._data_size and self.num == o.num
        if isinstance(o, int) and not isinstance(o, bool):
            return self.num == o
        return NotImplemented

    def _other_num(self, o):
        if isinstance(o, GenericNum):
            return o.num
        if isinstance(o, int) and not isinstance(o, bool):
            return o
        return None

    def __lt__(self, o):
        num = self._other_num(o)
        return NotImplemented if num is None else self.num < num

    def __le__(self, o):
        num = self._other_num(o)
        return NotImplemented if num is None else self.num <= num

    def __gt__(self, o):
        num = self._other_num(o)
        return NotImplemented if num is None else self.num > num

    def __ge__(self, o):
        num = self._other_num(o)
        return NotImplemented if num is None else self.num >= num

    '''
    The number with its explicit width tag, as an externally tagged mapping, e.g.
    {"Byte": -1}. Suitable for any serialization format that handles dicts.
    '''

    def to_dict(self):
        return {TAG_NAMES[self._data_size]: self.num}

    @classmethod
    def from_dict(cls, d):
        if not isinstance(d, dict) or len(d) != 1:
            raise ValueError(f"Expected a mapping with exactly one width tag, got {d!r}")
        (tag, num), = d.items()
        data_size = {name: data_size for data_size, name in TAG_NAMES.items()}.get(tag)
        if data_size is None:
            raise ValueError(f"Unknown width tag {tag!r}, expected one of {', '.join(TAG_NAMES.values())}")
        if not isinstance(num, int) or isinstance(num, bool):
            raise ValueError(f"Value for {tag} must be an integer, got {num!r}")
        if not fits_signed(num, data_size.bits):
            raise ValueError(f"Value {num} out-of-range for signed {data_size.bits:,d} bits")
        return cls(num, data_size)
