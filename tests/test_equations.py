import re

from mathformat.tex.equations import EINSTEIN, KNOWN_EQUATIONS, MAXWELL, SCHRODINGER
from mathformat.tex.rewriter import rewrite_to_latex
from mathformat.tex.rules import RuleGroup, contains_all, literal, sub


def test_einstein_field_equation(einstein_input, einstein_latex):
    assert rewrite_to_latex(einstein_input) == einstein_latex


def test_einstein_substitutions_fire_independently():
    out = rewrite_to_latex("G_{μν} Λg μν T_μν")
    assert r"G_{\mu\nu}" in out
    assert r"\Lambda g_{\mu\nu}" in out
    assert r"T_{\mu\nu}" in out
    assert "c^{4}" not in out
    assert r"8\pi G" not in out


def test_einstein_speed_of_light_and_coupling():
    out = rewrite_to_latex("G_μν = Λ c / 8πG")
    assert "c^{4}" in out
    assert r"8\pi G" in out


def test_einstein_needs_lambda():
    out = rewrite_to_latex("G_μν = 8πG T_μν")
    assert out == r"G_\mu\nu = 8\piG T_\mu\nu"


def test_einstein_leaves_latex_commands_containing_c_alone():
    out = rewrite_to_latex("G_μν + Λg_μν = a/b")
    assert r"\frac{a}{b}" in out
    assert "c^{4}" not in out


def test_einstein_is_idempotent(einstein_input):
    once = rewrite_to_latex(einstein_input)
    assert rewrite_to_latex(once) == once


def test_schrodinger_equation(schrodinger_input):
    assert (
        rewrite_to_latex(schrodinger_input)
        == r"i\hbar\frac{\partial\Psi}{\partial t} = \nabla^{2}Ψ"
    )


def test_schrodinger_needs_hbar():
    assert rewrite_to_latex("∂Ψ/∂t") == "∂Ψ/∂t"


def test_schrodinger_is_idempotent(schrodinger_input):
    once = rewrite_to_latex(schrodinger_input)
    assert rewrite_to_latex(once) == once


def test_maxwell_equations(maxwell_input):
    assert (
        rewrite_to_latex(maxwell_input)
        == r"\nabla \cdot \vec{E} = 0, \nabla \times \vec{B} = J"
    )


def test_maxwell_tolerates_whitespace_and_greek():
    out = rewrite_to_latex("∇ . B = 0 and ∇ × E = -∂B/∂t, ∇.E = ρ/ε")
    assert r"\nabla \cdot \vec{B} = 0" in out
    assert r"\nabla \times \vec{E}" in out
    assert r"\nabla \cdot \vec{E} = \rho/\epsilon" in out


def test_maxwell_needs_field_letter():
    assert rewrite_to_latex("∇.F") == "∇.F"


def test_maxwell_is_idempotent(maxwell_input):
    once = rewrite_to_latex(maxwell_input)
    assert rewrite_to_latex(once) == once


def test_registry_order():
    assert [eq.name for eq in KNOWN_EQUATIONS] == ["einstein", "schrodinger", "maxwell"]
    assert EINSTEIN.rules.name == "einstein"
    assert SCHRODINGER.rules.name == "schrodinger"
    assert MAXWELL.rules.name == "maxwell"


def test_rule_group_only_applies_when_triggered():
    group = RuleGroup(
        name="pythagoras",
        trigger=contains_all("a^2", "b^2"),
        substitutions=(sub(r"c\^2", literal(r"c^{2}")),),
    )
    assert group.apply("a^2 + b^2 = c^2") == "a^2 + b^2 = c^{2}"
    assert group.apply("c^2") == "c^2"


def test_literal_replacement_keeps_backslashes():
    assert sub(re.compile("x"), literal(r"\vec{x}")).apply("x") == r"\vec{x}"
