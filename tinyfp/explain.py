import math, logging
from .common import *
from .fpu import f32, float_to_raw
from .parse import is_bitstring, bitstring_to_raw, parse_float

logger = logging.getLogger(__name__)

def layout_lines(raw):  # full pattern, then the pattern split into its three fields
    return [bit_range(raw, N_BITS-1, 0),
            '',
            'sign | exponent | fraction',
            f'   {bit_range(raw, SIGN_BIT, SIGN_BIT)} | {bit_range(raw, EXPONENT_HIGH_BIT, EXPONENT_LOW_BIT)} | {bit_range(raw, FRACTION_HIGH_BIT, FRACTION_LOW_BIT)}',
            '']

def explain_bits(raw):
    """Derives the decimal value of a binary32 bit pattern, one output line per list entry.

    Infinities and NaNs stop after the raw exponent. Normal and denormal
    numbers continue with the unbiased exponent and the significand, and end
    with sign * significand * 2**exponent worked out in three steps.
    """
    f = f32(raw)
    lines = [f'sign bit = {f.sign_bit}',
             f'sign = {f.sign_char}',
             '',
             f'raw exponent    = {bit_range(f.raw, EXPONENT_HIGH_BIT, EXPONENT_LOW_BIT)} binary',
             f'                = {f.exponent_bits} decimal']
    if f.is_inf: return lines + [f'number = {f.sign_char}inf', '']
    if f.is_nan: return lines + ['number = NaN', '']
    scale = math.ldexp(1.0, f.exponent)
    return lines + [f'actual exponent = {f.exponent_bits} - exponent_bias',
                    f'                = {f.exponent_bits} - {f.EXP_BIAS}',
                    f'                = {f.exponent}',
                    '',
                    f'number = {f.sign_char}{f.implicit_bit}.{bit_range(f.raw, FRACTION_HIGH_BIT, FRACTION_LOW_BIT)} binary * 2**{f.exponent}',
                    f'       = {f.significand:g} decimal * 2**{f.exponent}',
                    f'       = {f.significand:g} * {scale:g}',
                    f'       = {f.value():g}',
                    '']

def explain(token):
    if is_bitstring(token):
        raw = bitstring_to_raw(token)
        logger.debug('%r: bit pattern %#010x', token, raw)
        return explain_bits(raw)
    raw = float_to_raw(parse_float(token))
    logger.debug('%r: decimal, encoded as %#010x', token, raw)
    return ['', f'{token} is represented as a float (IEEE-754 single-precision) by these bits:', ''] + layout_lines(raw) + explain_bits(raw)
