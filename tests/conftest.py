import pytest


@pytest.fixture
def einstein_input():
    return "G_μν + Λg_μν = c^4/(8πG) T_μν"


@pytest.fixture
def einstein_latex():
    return r"G_{\mu\nu} + \Lambda g_{\mu\nu} = c^{4}/(8\pi G) T_{\mu\nu}"


@pytest.fixture
def schrodinger_input():
    return "iħ∂Ψ/∂t = ∇^2Ψ"


@pytest.fixture
def maxwell_input():
    return "∇.E = 0, ∇×B = J"
