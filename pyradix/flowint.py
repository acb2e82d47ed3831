#!/usr/bin/env python
# -*- coding: utf-8 -*-

import pyradix.conv as conv
from pyradix.base import calc_mask, calc_signed_range, wrap_signed, wrap_unsigned


class FlowInt:
    '''
    Fixed-width signed or unsigned integers, integers that explicitly under- or over-flow
    according to a particular number of bits. Sub-typed in this module by signedness
    and width, but also usable on its own with an explicit signedness.
    '''

    IS_SIGNED = False
    NUM_BITS = 8

    def __init__(self, num, is_signed=False, num_bits=8):
        '''
        Initialize the class with a value that can be converted to a signed or unsigned integer
        with the top-level int() call, and also a particular bit size.
        :param num: Integer value
        :param is_signed: Is this object a signed integer, or an unsiged integer with twice
        the range only on the positive side? Defaults to False for a traditional unsigned byte.
        :param num_bits: Number of bits for this signed or unsigned integer. Defaults to 8 for a
        traditional unsigned byte.
        '''
        self.num = int(num)
        self.is_signed = is_signed
        self.num_bits = num_bits

        self.two_pow = 2 ** num_bits
        self.min_signed_neg, self.max_signed_pos = calc_signed_range(num_bits)
        if self.is_signed:
            assert self.num in range(self.min_signed_neg, self.max_signed_pos + 1), f"Value {self.num} out-of-range for signed {num_bits:,d} bits"
        else:
            assert self.num in range(self.two_pow), f"Value {self.num} out-of-range for unsigned {num_bits:,d} bits"
        self.mask = calc_mask(num_bits)  # 0xFFF... or 0b111...

    def wrap(self, num):
        '''
        New integer of the same width and signedness, from any Python integer
        truncated to this width.
        '''
        wrap_fn = wrap_signed if self.is_signed else wrap_unsigned
        return FlowInt(wrap_fn(num, self.num_bits), is_signed=self.is_signed, num_bits=self.num_bits)

    def _other_num(self, o):
        '''
        Number to compare against, for fixed-width or plain Python integers only.
        '''
        if isinstance(o, FlowInt):
            return o.num
        if isinstance(o, int) and not isinstance(o, bool):
            return o
        return None

    @property
    def pattern(self):
        '''
        Raw bit pattern, always as an unsigned Python integer.
        '''
        return self.num & self.mask

    def __format__(self, *fmt_args):
        '''
        Just use the underlying Python int()'s formatting.
        '''
        return self.num.__format__(*fmt_args)

    def __int__(self):
        return self.num

    def __index__(self):
        return self.num

    '''
    Comparison dunders cannot overflow, so just implement these with the underlying
    Python int() operators.
    '''
    def __eq__(self, o):
        num = self._other_num(o)
        return NotImplemented if num is None else self.num == num

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

    def __neg__(self):
        return self.wrap(-self.num)

    def shl(self):
        '''
        Shift left by one bit, the top bit falls off.
        '''
        return self.wrap(self.num << 1)

    def shr(self):
        '''
        Shift right by one bit. Python shifts are arithmetic on negative
        integers, so signed integers keep their sign bit.
        '''
        return self.wrap(self.num >> 1)

    def get_bit(self, idx):
        '''
        Value of a single bit, zero being the least significant. Bits outside of
        the width always read as unset.
        '''
        if idx < 0 or idx >= self.num_bits:
            return False
        return (self.pattern >> idx) & 1 == 1

    def flip_bit(self, idx):
        '''
        Integer with a single bit toggled. Bits outside of the width cannot be
        toggled, so the integer is returned unchanged.
        '''
        if idx < 0 or idx >= self.num_bits:
            return self.wrap(self.num)
        return self.wrap(self.pattern ^ (1 << idx))

    def to_radix(self, radix, upper=False):
        return conv.to_radix(self.num, radix, self.num_bits, upper=upper)

    @classmethod
    def from_radix(cls, text, radix, num_bits=None):
        '''
        Parse text in a certain radix into an integer of this class, or None
        if the text is malformed or does not fit.
        '''
        num_bits = num_bits or cls.NUM_BITS
        num = conv.from_radix(text, radix, num_bits, is_signed=cls.IS_SIGNED)
        if num is None:
            return None
        return cls(num, num_bits=num_bits)


class IFlow(FlowInt):
    """
    Fixed-width signed integers, an integer that explicitly under- or over-flows
    according to a particular number of bits.
    """

    IS_SIGNED = True

    def __init__(self, num, num_bits=8):
        super().__init__(num, is_signed=True, num_bits=num_bits)

    def __repr__(self):
        return f"iflow{self.num_bits}({self.num})"

    def wrap(self, num):
        return self.__class__(wrap_signed(num, self.num_bits), num_bits=self.num_bits)

    def cast(self, num_bits):
        '''
        Re-interpret as a signed integer of another width: sign-extended when
        widening, truncated to the low-order bits when narrowing.
        '''
        return IFLOW_CLASSES.get(num_bits, IFlow)(wrap_signed(self.num, num_bits), num_bits=num_bits)


class UFlow(FlowInt):
    """
    Fixed-width unsigned integers, an integer that explicitly under- or over-flows
    according to a particular number of bits.
    """

    def __init__(self, num, num_bits=8):
        super().__init__(num, is_signed=False, num_bits=num_bits)

    def __repr__(self):
        return f"uflow{self.num_bits}({self.num})"

    def wrap(self, num):
        return self.__class__(wrap_unsigned(num, self.num_bits), num_bits=self.num_bits)

    def cast(self, num_bits):
        return UFlow(wrap_unsigned(self.num, num_bits), num_bits=num_bits)


class IFlow8(IFlow):
    """
    Class for a common 8-bit signed integer type.
    """

    NUM_BITS = 8

    def __init__(self, num, num_bits=8):
        super().__init__(num, num_bits=num_bits)


class IFlow16(IFlow):

    NUM_BITS = 16

    def __init__(self, num, num_bits=16):
        super().__init__(num, num_bits=num_bits)


class IFlow32(IFlow):

    NUM_BITS = 32

    def __init__(self, num, num_bits=32):
        super().__init__(num, num_bits=num_bits)


class IFlow64(IFlow):

    NUM_BITS = 64

    def __init__(self, num, num_bits=64):
        super().__init__(num, num_bits=num_bits)


class IFlow128(IFlow):
    """
    Class for a common 128-bit signed integer type.
    """

    NUM_BITS = 128

    def __init__(self, num, num_bits=128):
        super().__init__(num, num_bits=num_bits)


IFLOW_CLASSES = {
    8: IFlow8,
    16: IFlow16,
    32: IFlow32,
    64: IFlow64,
    128: IFlow128,
}
