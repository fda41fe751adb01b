import struct, math, fractions
from .common import *

NORMAL   = 'normal'
DENORMAL = 'denormal'  # a.k.a. subnormal; includes +/-0
INF      = 'inf'
NAN      = 'nan'

def rational_to_raw(q):  # rounds an exact rational to binary32 once, ties to even
    if q == 0: return 0
    s_sign, q = q < 0, abs(q)
    s_e = q.numerator.bit_length() - q.denominator.bit_length()
    if q < fractions.Fraction(2)**s_e: s_e -= 1  # now 2**s_e <= q < 2**(s_e+1)
    s_e = max(s_e, 1-EXPONENT_BIAS)  # subnormal: exponent stays at the minimum, significand loses bits
    s_s = round(q * fractions.Fraction(2)**(FRACTION_BITS-s_e))
    if s_s >> FRACTION_BITS+1: s_s, s_e = s_s >> 1, s_e+1  # rounding carried into a new top bit
    sign = s_sign << SIGN_BIT
    if s_e > EXPONENT_BIAS: return sign | EXPONENT_INF_NAN << EXPONENT_LOW_BIT  # overflow to +/-inf
    if s_s >> FRACTION_BITS == 0: return sign | s_s  # subnormal or zero
    return sign | (s_e+EXPONENT_BIAS) << EXPONENT_LOW_BIT | s_s & ((1 << FRACTION_BITS)-1)

def float_to_raw(f):
    """Returns the binary32 bit pattern of f (rounded to nearest even) as an unsigned int.

    f is a float or an exact fractions.Fraction. Floats are packed and
    unpacked with the same explicit byte order, so this is a value
    reinterpretation and independent of the host's endianness. Magnitudes that
    round past the largest finite single become signed infinity.
    """
    if isinstance(f, fractions.Fraction): return rational_to_raw(f)
    try: return struct.unpack('<I', struct.pack('<f', f))[0]
    except OverflowError: return struct.unpack('<I', struct.pack('<f', math.copysign(math.inf, f)))[0]

def raw_to_float(raw): return struct.unpack('<f', struct.pack('<I', zext(N_BITS, raw)))[0]

def classify(exponent_bits, fraction_bits):
    if exponent_bits == EXPONENT_INF_NAN: return NAN if fraction_bits else INF
    if exponent_bits == 0: return DENORMAL
    return NORMAL

class f32:
    FLEN      = N_BITS
    TLEN      = FRACTION_BITS  # number of trailing significand bits
    EXP_BIAS  = EXPONENT_BIAS

    def __init__(self, float_or_raw):
        self.raw = zext(self.FLEN, float_or_raw) if isinstance(float_or_raw, int) else float_to_raw(float_or_raw)
        self.sign_bit      = extract(self.raw, SIGN_BIT, SIGN_BIT)
        self.exponent_bits = extract(self.raw, EXPONENT_HIGH_BIT, EXPONENT_LOW_BIT)
        self.fraction_bits = extract(self.raw, FRACTION_HIGH_BIT, FRACTION_LOW_BIT)
        self.sign, self.sign_char = (-1, '-') if self.sign_bit else (1, '+')
        self.kind = classify(self.exponent_bits, self.fraction_bits)
        self.is_neg = self.sign_bit == 1
        self.is_normal, self.is_denormal, self.is_inf, self.is_nan = (self.kind == k for k in (NORMAL, DENORMAL, INF, NAN))
        self.is_zero = self.is_denormal and self.fraction_bits == 0
        self.implicit_bit = self.exponent = self.significand = None  # undefined for inf and nan
        if self.is_normal or self.is_denormal:
            self.implicit_bit = 0 if self.is_denormal else 1
            self.exponent = self.exponent_bits - self.EXP_BIAS + self.is_denormal  # denormals share the smallest normal exponent
            self.significand = self.sign * (self.implicit_bit + self.fraction_bits / (1 << self.TLEN))

    @property
    def float(self): return raw_to_float(self.raw)
    def value(self): return self.float if self.significand is None else self.significand * math.ldexp(1.0, self.exponent)  # significand * 2**exponent in double precision
    def pack(self): return self.sign_bit << SIGN_BIT | self.exponent_bits << EXPONENT_LOW_BIT | self.fraction_bits << FRACTION_LOW_BIT

    def __repr__(self) -> str: return f'f32({self.sign_char} {self.kind} e: {self.exponent} s: {self.significand} raw: {self.raw:#010x})'
