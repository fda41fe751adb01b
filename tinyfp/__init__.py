from .common import extract, bit_range, zext
from .fpu import f32, float_to_raw, rational_to_raw, raw_to_float, classify, NORMAL, DENORMAL, INF, NAN
from .parse import is_bitstring, bitstring_to_raw, parse_float
from .explain import explain, explain_bits, layout_lines
