#!/usr/bin/env python
# -*- coding: utf-8 -*-

import logging

from pyradix.base import Radix, calc_mask, calc_signed_range, wrap_signed

'''
Radix conversion for fixed-width integers. Every function is pure and works
on a plain Python int together with the bit width (and signedness) of the
primitive it stands for, so that the same code serves every width.
'''


def _render(num, num_bits, radix, fmt_type):
    '''
    Full two's-complement bit pattern of a number, left zero-padded to the
    digit count of the width in this radix.
    '''
    pattern = num & calc_mask(num_bits)
    return f"{pattern:0{radix.pad_width(num_bits)}{fmt_type}}"


def to_binary(num, num_bits):
    return _render(num, num_bits, Radix.BINARY, 'b')


def to_octal(num, num_bits):
    '''
    Octal pattern, padded to ceil(num_bits / 3) digits. The widths are not
    multiples of three, so the top digit only ever carries the left-over bits.
    '''
    return _render(num, num_bits, Radix.OCTAL, 'o')


def to_decimal(num, num_bits=None):
    '''
    Signed decimal text, never padded. The width is ignored.
    '''
    return f"{int(num):d}"


def to_hex_lower(num, num_bits):
    return _render(num, num_bits, Radix.HEX, 'x')


def to_hex_upper(num, num_bits):
    return _render(num, num_bits, Radix.HEX, 'X')


def to_radix(num, radix, num_bits, upper=False):
    if radix is Radix.HEX and upper:
        return to_hex_upper(num, num_bits)
    return {
        Radix.BINARY: to_binary,
        Radix.OCTAL: to_octal,
        Radix.DECIMAL: to_decimal,
        Radix.HEX: to_hex_lower,
    }[radix](num, num_bits)


def _reject(text, radix, num_bits, is_signed, reason):
    kind = 'signed' if is_signed else 'unsigned'
    logging.debug(f"Cannot parse '{text}' as {radix.name.lower()} {kind} {num_bits:,d}-bit integer: {reason}.")
    return None


def _parse(text, radix, num_bits, is_signed):
    '''
    Parse text of a single radix into an integer of a certain width, or None.

    Decimal text is a (signed) number that must lie in the range of the width.
    Binary, octal and hex text is an unsigned bit pattern that must fit in the
    width; for signed widths that pattern is then read back as two's complement,
    so "ff" is -1 at 8 bits. No prefix, whitespace, underscore or (outside of
    decimal) sign is accepted.
    '''
    if not isinstance(text, str):
        return _reject(text, radix, num_bits, is_signed, 'not a string')

    is_neg = radix is Radix.DECIMAL and is_signed and text.startswith('-')
    digits = text[1:] if is_neg else text
    if len(digits) == 0:
        return _reject(text, radix, num_bits, is_signed, 'no digits')
    bad_chars = set(digits.lower()) - set(radix.digits)
    if bad_chars:
        return _reject(text, radix, num_bits, is_signed, f"invalid digits {''.join(sorted(bad_chars))!r}")

    # int() refuses very long decimal strings, so drop zero padding and reject
    # anything still longer than the widest number of the width
    if radix is Radix.DECIMAL:
        digits = digits.lstrip('0') or '0'
        if len(digits) > len(str(1 << num_bits)):
            return _reject(text, radix, num_bits, is_signed, 'out of range')

    num = int(digits, radix.value)
    if radix is Radix.DECIMAL:
        num = -num if is_neg else num
        min_num, max_num = calc_signed_range(num_bits) if is_signed else (0, calc_mask(num_bits))
        if not min_num <= num <= max_num:
            return _reject(text, radix, num_bits, is_signed, 'out of range')
        return num

    if num >> num_bits:
        return _reject(text, radix, num_bits, is_signed, 'pattern wider than the integer')
    return wrap_signed(num, num_bits) if is_signed else num


def from_binary(text, num_bits, is_signed=True):
    return _parse(text, Radix.BINARY, num_bits, is_signed)


def from_octal(text, num_bits, is_signed=True):
    return _parse(text, Radix.OCTAL, num_bits, is_signed)


def from_decimal(text, num_bits, is_signed=True):
    return _parse(text, Radix.DECIMAL, num_bits, is_signed)


def from_hex(text, num_bits, is_signed=True):
    return _parse(text, Radix.HEX, num_bits, is_signed)


def from_radix(text, radix, num_bits, is_signed=True):
    return _parse(text, radix, num_bits, is_signed)
