#!/usr/bin/env python
# -*- coding: utf-8 -*-

import enum

'''
Stateless functions and tags that are used throughout the fixed-width
primitive, radix conversion and generic number modules.
'''


class DataSize(enum.Enum):
    '''
    Width tag of a generic number. The value is the storage size in bytes.
    '''
    BYTE = 1
    WORD = 2
    DWORD = 4
    QWORD = 8
    OWORD = 16

    @property
    def bits(self):
        return self.value * 8

    @classmethod
    def least(cls, num):
        '''
        Narrowest width whose signed range holds the integer, trying 8, 16,
        32, 64 and then 128 bits. Returns None if not even 128 bits will do.
        '''
        for data_size in cls:
            if fits_signed(num, data_size.bits):
                return data_size
        return None


class Radix(enum.Enum):
    '''
    Numeral base used to render and parse text.
    '''
    BINARY = 2
    OCTAL = 8
    DECIMAL = 10
    HEX = 16

    @property
    def digits(self):
        return '0123456789abcdef'[:self.value]

    @property
    def prefix(self):
        return {
            Radix.BINARY: '0b',
            Radix.OCTAL: '0o',
            Radix.DECIMAL: '',
            Radix.HEX: '0x',
        }[self]

    def pad_width(self, num_bits):
        '''
        Number of digits a full bit pattern of `num_bits` bits renders to. Decimal
        text is never padded, so it gets zero.
        '''
        if self is Radix.DECIMAL:
            return 0
        bits_per_digit = self.value.bit_length() - 1
        return -(-num_bits // bits_per_digit)  # ceil


def calc_mask(num_bits):
    return (1 << num_bits) - 1  # 0xFFF... or 0b111...


def calc_signed_range(num_bits):
    '''
    Inclusive (min, max) of a two's-complement integer of a certain bit size.
    '''
    half = 1 << (num_bits - 1)
    return -half, half - 1


def fits_signed(num, num_bits):
    min_signed, max_signed = calc_signed_range(num_bits)
    return min_signed <= num <= max_signed


def wrap_signed(num, num_bits):
    '''
    Two's-complement truncation of any Python integer to a signed integer of
    `num_bits` bits. High-order bits are discarded, never saturated.
    '''
    pattern = num & calc_mask(num_bits)
    if pattern >> (num_bits - 1):
        return pattern - (1 << num_bits)
    return pattern


def wrap_unsigned(num, num_bits):
    return num & calc_mask(num_bits)


def separate(text, chunk_size, separator):
    '''
    Insert a separator every `chunk_size` characters, grouping from the least
    significant (right-most) end, e.g. "1234567" -> "1,234,567". A chunk size
    of zero leaves the text untouched. A leading minus sign is kept outside of
    the groups.
    '''
    text = str(text)
    if chunk_size == 0:
        return text
    sign = ''
    if text.startswith('-'):
        sign, text = '-', text[1:]
    head = len(text) % chunk_size
    chunks = [text[:head]] if head else []
    chunks += [text[i:i + chunk_size] for i in range(head, len(text), chunk_size)]
    return sign + separator.join(chunks)


def strip_radix_prefix(text, radix):
    '''
    Trim surrounding whitespace and a leading radix prefix ("0x", "0b" or "0o",
    in either case) from a literal. Decimal literals have no prefix.
    '''
    text = text.strip()
    if radix.prefix and text.lower().startswith(radix.prefix):
        return text[len(radix.prefix):]
    return text
