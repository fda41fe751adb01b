import re, math, logging, functools, fractions
from .common import N_BITS

logger = logging.getLogger(__name__)

# strtof-style prefix: C whitespace, sign, then inf/infinity, nan[(chars)] or a decimal literal. Longest alternative first.
float_prefix = re.compile(r'[ \t\n\v\f\r]*([+-]?)(?:(infinity|inf)|(nan)(?:\([0-9a-z_]*\))?|(?:([0-9]+)(?:\.([0-9]*))?|\.([0-9]+))(?:e([+-]?[0-9]+))?)', re.IGNORECASE | re.ASCII)

def is_bitstring(token):
    """Decides whether a command line token is a literal bit pattern.

    A token is a bit pattern when it is longer than 28 characters, consists of
    '0' and '1' only and has exactly 32 characters. Anything else is parsed as a
    decimal or special (inf/nan) literal. Changing these thresholds changes how
    user input is interpreted.
    """
    return len(token) > N_BITS-4 and len(token) == N_BITS and all(c in '01' for c in token)

def bitstring_to_raw(token):  # character 0 is the MSB
    assert is_bitstring(token), f'not a {N_BITS}-bit pattern: {token!r}'
    return functools.reduce(int.__or__, [(c != '0') << (N_BITS-1-i) for i, c in enumerate(token)], 0)

SIGNIFICANT_DIGITS = 200  # far more than any binary32 rounding decision needs

def decimal_value(sign, digits, fraction, exponent):  # exact value of a decimal literal, without building huge powers of ten
    significant = (digits + fraction).lstrip('0')
    if not significant: return -0.0 if sign == '-' else 0.0
    e_digits = (exponent or '0').lstrip('+-').lstrip('0')
    e = int(e_digits or '0') if len(e_digits) < 12 else 10**12
    scale = (-e if (exponent or '').startswith('-') else e) - len(fraction)
    magnitude = len(significant) + scale  # 10**(magnitude-1) <= |value| < 10**magnitude
    if magnitude > 40: return -math.inf if sign == '-' else math.inf  # beyond any single, rounds to infinity
    if magnitude < -46: return -0.0 if sign == '-' else 0.0  # below half the smallest denormal, rounds to zero
    kept, dropped = significant[:SIGNIFICANT_DIGITS], significant[SIGNIFICANT_DIGITS:]
    scale += len(dropped)
    if dropped.strip('0'): kept, scale = kept + '1', scale-1  # sticky digit keeps ties from looking exact
    value = int(kept) * fractions.Fraction(10)**scale
    return -value if sign == '-' else value

def parse_float(token):
    """Parses the longest numeric prefix of token like C strtof. Returns 0.0 if there is none.

    Finite nonzero decimals come back as an exact fractions.Fraction so that
    float_to_raw can round them to single precision in one step. Zeros,
    infinities and NaNs come back as floats, keeping their sign.
    """
    if m := float_prefix.match(token):
        sign, inf, nan, digits, fraction, leading_point_fraction, exponent = m.groups()
        if inf: return float(sign + 'inf')
        if nan: return float(sign + 'nan')  # n-char payloads are ignored
        return decimal_value(sign, digits or '', fraction or leading_point_fraction or '', exponent)
    logger.warning('%r is not a number, explaining 0.0 instead', token)
    return 0.0
