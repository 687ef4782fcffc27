# bloch_inspector/tests/test_reduce.py
import numpy as np
import pytest
from bloch_inspector.complex_math import ComplexNumber, approx_equal
from bloch_inspector.reduce_serial import insert_bit, reduced_density

# (rest, position, bit) -> basis index, worked out by hand
INSERT_2Q = {
    (0, 0, 0): 0, (0, 0, 1): 1, (1, 0, 0): 2, (1, 0, 1): 3,
    (0, 1, 0): 0, (0, 1, 1): 2, (1, 1, 0): 1, (1, 1, 1): 3,
}

INSERT_3Q = {
    (0, 0, 0): 0, (0, 0, 1): 1, (1, 0, 0): 2, (1, 0, 1): 3,
    (2, 0, 0): 4, (2, 0, 1): 5, (3, 0, 0): 6, (3, 0, 1): 7,
    (0, 1, 0): 0, (0, 1, 1): 2, (1, 1, 0): 1, (1, 1, 1): 3,
    (2, 1, 0): 4, (2, 1, 1): 6, (3, 1, 0): 5, (3, 1, 1): 7,
    (0, 2, 0): 0, (0, 2, 1): 4, (1, 2, 0): 1, (1, 2, 1): 5,
    (2, 2, 0): 2, (2, 2, 1): 6, (3, 2, 0): 3, (3, 2, 1): 7,
}

def test_insert_bit_worked_examples():
    assert insert_bit(0, 0, 1) == 1
    assert insert_bit(1, 1, 0) == 1
    assert insert_bit(1, 0, 1) == 3

@pytest.mark.parametrize("table", [INSERT_2Q, INSERT_3Q])
def test_insert_bit_tables(table):
    for (rest, position, bit), index in table.items():
        assert insert_bit(rest, position, bit) == index, (rest, position, bit)

def test_insert_bit_pairs_cover_every_index():
    for n in range(1, 6):
        for k in range(n):
            seen = []
            for rest in range(1 << (n - 1)):
                i0 = insert_bit(rest, k, 0)
                i1 = insert_bit(rest, k, 1)
                assert i1 == i0 | (1 << k) and not (i0 >> k) & 1
                seen += [i0, i1]
            assert sorted(seen) == list(range(1 << n))

def test_insert_bit_rejects_bad_args():
    with pytest.raises(ValueError):
        insert_bit(0, -1, 0)
    with pytest.raises(ValueError):
        insert_bit(0, 0, 2)

def test_reduced_density_matches_numpy_partial_trace():
    rng = np.random.default_rng(7)
    n = 3
    psi = rng.normal(size=1 << n) + 1j * rng.normal(size=1 << n)
    psi /= np.linalg.norm(psi)
    amps = [ComplexNumber(a.real, a.imag) for a in psi]
    # axis order of reshape is big-endian: qubit k lives on axis n-1-k
    t = psi.reshape([2] * n)
    for k in range(n):
        m = np.moveaxis(t, n - 1 - k, 0).reshape(2, -1)
        rho = m @ m.conj().T
        r = reduced_density(amps, k, n)
        assert r.rho00 == pytest.approx(rho[0, 0].real)
        assert r.rho11 == pytest.approx(rho[1, 1].real)
        assert approx_equal(r.rho01, ComplexNumber(rho[0, 1].real, rho[0, 1].imag), eps=1e-9)
        assert r.rho00 + r.rho11 == pytest.approx(1.0)

def test_reduced_density_short_vector_reads_zeros():
    # index 1 is past the end of a length-1 vector
    r = reduced_density([ComplexNumber(1.0, 0.0)], 0, 1)
    assert r.rho00 == 1.0 and r.rho11 == 0.0
    assert r.rho01 == ComplexNumber(0.0, 0.0)

def test_reduced_density_rejects_bad_qubit():
    with pytest.raises(ValueError):
        reduced_density([ComplexNumber(1.0, 0.0)] * 4, 2, 2)
