from mathformat.converter import ConversionResult, convert
from mathformat.render.mathml import EINSTEIN_MATHML, latex_to_mathml
from mathformat.tex.detector import PatternFlags


def test_mathml_template_for_einstein(einstein_latex):
    assert latex_to_mathml(einstein_latex) == EINSTEIN_MATHML
    assert "<mi>Λ</mi><mi>g</mi>" in EINSTEIN_MATHML


def test_mathml_wraps_anything_else():
    assert latex_to_mathml("x^{2}") == "<math><mrow>x^{2}</mrow></math>"


def test_convert_einstein(einstein_input, einstein_latex):
    result = convert(einstein_input)
    assert result.latex == einstein_latex
    assert result.mathml == EINSTEIN_MATHML
    assert result.patterns.is_einstein_equation is True
    assert result.patterns.has_greek_letters is True


def test_convert_simple_expression():
    result = convert("a/b + x_1")
    assert result.latex == r"\frac{a}{b} + x_{1}"
    assert result.mathml == r"<math><mrow>\frac{a}{b} + x_{1}</mrow></math>"
    assert result.patterns.has_fractions is True
    assert result.patterns.has_subscripts is True


def test_convert_empty_input():
    result = convert("")
    assert result == ConversionResult(input="")
    assert result.is_empty
    assert result.patterns == PatternFlags()


def test_to_dict():
    d = convert("x^2").to_dict()
    assert d["input"] == "x^2"
    assert d["latex"] == "x^{2}"
    assert d["mathml"] == "<math><mrow>x^{2}</mrow></math>"
    assert d["patterns"]["hasSuperscripts"] is True
