import importlib.resources, yaml

def check_layout(layout):  # raises ValueError unless the fields exactly partition the word
    covered = sorted(b for h, l in (layout['sign'], layout['exponent'], layout['fraction']) for b in range(l, h+1))
    if covered != list(range(layout['width'])): raise ValueError('sign, exponent and fraction must partition all bits')
    exponent_high, exponent_low = layout['exponent']
    if layout['inf_nan_exponent'] != (1 << exponent_high-exponent_low+1) - 1: raise ValueError('inf/nan exponent must be all ones')
    if layout['bias'] != layout['inf_nan_exponent'] >> 1: raise ValueError('bias must be half the exponent range')
    return layout

try:
    layout = check_layout(yaml.safe_load(importlib.resources.files('tinyfp').joinpath('layout.yaml').read_text())['binary32'])
    N_BITS = layout['width']
    SIGN_BIT, _ = layout['sign']
    EXPONENT_HIGH_BIT, EXPONENT_LOW_BIT = layout['exponent']
    FRACTION_HIGH_BIT, FRACTION_LOW_BIT = layout['fraction']
    EXPONENT_BIAS = layout['bias']
    EXPONENT_INF_NAN = layout['inf_nan_exponent']
except Exception as e: raise Exception(f"Unable to load the binary32 field layout from tinyfp/layout.yaml ({e}).\n"
                                       "Reinstall the package so its data files are present.") from e

FRACTION_BITS = FRACTION_HIGH_BIT - FRACTION_LOW_BIT + 1

def zext(length, word): return word&((1<<length)-1)

def extract(value, high, low):  # unsigned value of bits high..low (inclusive)
    assert 0 <= low <= high < N_BITS, f'invalid bit range {high}..{low}'
    mask = (1 << (high-low+1)) - 1
    return (value >> low) & mask

def dr(h,l): return list(range(h,l-1,-1))

def bit_range(value, high, low): return ''.join(str(extract(value, i, i)) for i in dr(high, low))  # MSB first
