import pathlib, logging
import pytest, yaml
from tinyfp import explain, explain_bits, layout_lines, f32
from tinyfp.tinyfp_explain import main

golden = yaml.safe_load((pathlib.Path(__file__).parent / 'golden.yaml').read_text())

@pytest.mark.parametrize('case', golden, ids=[c['token'] for c in golden])
def test_golden_output(case, capsys):
    assert main([case['token']]) == 0
    assert capsys.readouterr().out == case['output']

@pytest.mark.parametrize('case', golden, ids=[c['token'] for c in golden])
def test_explain_lines(case):
    assert '\n'.join(explain(case['token'])) + '\n' == case['output']

def test_several_tokens_in_order(capsys):
    main(['0.15625', '01111111110000000000000000000000'])
    out = capsys.readouterr().out
    expected = {c['token']: c['output'] for c in golden}
    assert out == expected['0.15625'] + expected['01111111110000000000000000000000']

def test_no_tokens(capsys):
    assert main([]) == 0
    assert capsys.readouterr().out == ''

def test_layout_lines():
    assert layout_lines(0xc2c04000) == ['11000010110000000100000000000000', '', 'sign | exponent | fraction',
                                        '   1 | 10000101 | 10000000100000000000000', '']

def test_negative_infinity():
    assert explain_bits(0xff800000)[-2:] == ['number = -inf', '']
    assert explain('-inf')[-2] == 'number = -inf'

def test_special_values_stop_after_raw_exponent():
    for raw in (0x7f800000, 0x7fc00001):
        assert not any(l.startswith('actual exponent') for l in explain_bits(raw))

def test_denormal_derivation():
    lines = explain('00000000000000000000000000000001')
    assert lines[5:8] == ['actual exponent = 0 - exponent_bias', '                = 0 - 127', '                = -126']
    assert lines[9] == 'number = +0.00000000000000000000001 binary * 2**-126'
    assert lines[10] == '       = 1.19209e-07 decimal * 2**-126'
    assert lines[12] == '       = 1.4013e-45'
    assert f32(1).implicit_bit == 0

def test_negative_zero():
    lines = explain('-0')
    assert lines[3] == '1' + '0'*31
    assert lines[-2] == '       = -0'

def test_bitstring_and_decimal_agree():
    assert explain('0.1')[8:] == explain('00111101110011001100110011001101')

def test_wrong_length_bitstring_is_decimal():
    lines = explain('0'*31)
    assert lines[1].startswith('0'*31 + ' is represented')

def test_non_ascii_inf_is_zero(capsys):
    lines = explain('ınf')
    assert lines[3] == '0'*32 and lines[-2] == '       = 0'
    assert main(['ınf', 'İNF']) == 0
    assert capsys.readouterr().out.count('00000000000000000000000000000000') == 2

def test_decimal_rounds_once_to_nearest_single():
    assert explain('1.000000059604644776257986738')[3] == '00111111100000000000000000000001'

def test_debug_log_names_the_pattern(caplog):
    with caplog.at_level(logging.DEBUG, logger='tinyfp.explain'):
        explain('0.15625')
        explain('01111111110000000000000000000000')
    assert [r.getMessage() for r in caplog.records] == ["'0.15625': decimal, encoded as 0x3e200000",
                                                        "'01111111110000000000000000000000': bit pattern 0x7fc00000"]
