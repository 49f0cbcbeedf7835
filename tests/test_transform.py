# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Scott Friedman and Project Contributors

"""
Unit tests for the discrete wavelet transform.
"""

import math
import warnings

import numpy as np
import pytest
import pywt

import discrete_wavelets.transform as transform_module

from discrete_wavelets import (
    DiscreteWaveletTransform,
    EmptyCoefficientsError,
    ExtensionMode,
    FilterLengthMismatchError,
    FilterPair,
    FilterTooShortError,
    InvalidDataError,
    InvalidLevelError,
    LengthMismatchError,
    NegativeLengthError,
    NegativeLevelError,
    NonIntegerLengthError,
    UnknownModeError,
    UnknownWaveletError,
    WaveletBasis,
    WaveletType,
    dwt,
    energy,
    idwt,
    max_level,
    pad,
    wavedec,
    waverec,
)

SQRT2 = math.sqrt(2)
HAAR_ALIASES = ["haar", "db1", "D2", WaveletType.HAAR]
ALL_WAVELETS = [wavelet.value for wavelet in WaveletType]
ALL_MODES = [mode.value for mode in ExtensionMode]


def with_dec(basis, dec):
    return WaveletBasis(dec=dec, rec=basis.rec)


def with_rec(basis, rec):
    return WaveletBasis(dec=basis.dec, rec=rec)


def assert_coeffs_close(actual, expected):
    assert len(actual) == len(expected)
    for a, e in zip(actual, expected):
        np.testing.assert_allclose(a, e, atol=1e-6)


def assert_reconstructed(rec, data, mode):
    """Reconstruction of odd-length data carries one trailing extension sample."""
    data = np.asarray(data, dtype=float)
    if len(rec) == len(data) + 1:
        data = pad(data, (0, 1), mode)
    assert len(rec) == len(data)
    np.testing.assert_allclose(rec, data, atol=1e-9)


class TestDwt:
    @pytest.mark.parametrize("alias", HAAR_ALIASES)
    def test_known_coefficients(self, alias, haar_datasets):
        for dataset in haar_datasets:
            approx, detail = dwt(dataset["data"], alias, "zero")
            assert_coeffs_close([approx, detail], dataset["dwt"])

    def test_haar_vector(self):
        approx, detail = dwt([1, 2, 3, 4], "haar", "zero")
        np.testing.assert_allclose(approx, [3 / SQRT2, 7 / SQRT2])
        np.testing.assert_allclose(detail, [-1 / SQRT2, -1 / SQRT2])

    def test_explicit_basis(self, haar_basis, haar_datasets):
        approx, detail = dwt(haar_datasets[0]["data"], haar_basis, "zero")
        assert_coeffs_close([approx, detail], haar_datasets[0]["dwt"])

    @pytest.mark.parametrize("wavelet", ALL_WAVELETS)
    def test_output_lengths(self, wavelet):
        filter_length = 2 * int(wavelet[2:]) if wavelet != "haar" else 2
        for length in [1, 2, 7, 16, 33]:
            approx, detail = dwt(np.ones(length), wavelet, "symmetric")
            expected = (length + filter_length - 1) // 2
            assert len(approx) == expected
            assert len(detail) == expected

    def test_empty_data(self):
        with pytest.raises(InvalidDataError):
            dwt([], "haar")
        with pytest.raises(InvalidDataError):
            dwt(None, "haar")

    def test_multidimensional_data(self):
        with pytest.raises(InvalidDataError):
            dwt(np.ones((4, 4)), "haar")

    def test_unequal_filter_lengths(self, haar_basis):
        basis = with_dec(haar_basis, FilterPair(
            low=haar_basis.dec.low, high=haar_basis.dec.high + (-1.0, 1.0)))
        with pytest.raises(FilterLengthMismatchError):
            dwt([1, 2, 3, 4], basis)

    def test_filters_too_short(self, haar_basis):
        basis = with_dec(haar_basis, FilterPair(low=(1.0,), high=(1.0,)))
        with pytest.raises(FilterTooShortError):
            dwt([1, 2, 3, 4], basis)

    def test_unknown_wavelet(self):
        with pytest.raises(UnknownWaveletError):
            dwt([1, 2, 3, 4], "db42")

    def test_unknown_mode(self):
        with pytest.raises(UnknownModeError):
            dwt([1, 2, 3, 4], "haar", "foobar")

    @pytest.mark.parametrize("wavelet", ALL_WAVELETS)
    @pytest.mark.parametrize("mode", ALL_MODES)
    def test_matches_pywavelets(self, wavelet, mode, rng):
        data = rng.normal(size=37)
        approx, detail = dwt(data, wavelet, mode)
        ref_approx, ref_detail = pywt.dwt(data, wavelet, mode=mode)
        np.testing.assert_allclose(approx, ref_approx, atol=1e-10)
        np.testing.assert_allclose(detail, ref_detail, atol=1e-10)


class TestIdwt:
    @pytest.mark.parametrize("alias", HAAR_ALIASES)
    def test_known_coefficients(self, alias, haar_datasets):
        for dataset in haar_datasets:
            approx, detail = dataset["dwt"]
            np.testing.assert_allclose(
                idwt(approx, detail, alias), dataset["data"], atol=1e-9)

    @pytest.mark.parametrize("wavelet", ALL_WAVELETS)
    @pytest.mark.parametrize("mode", ALL_MODES)
    def test_single_level_round_trip(self, wavelet, mode, rng):
        for length in [1, 2, 5, 16, 31]:
            data = rng.normal(size=length)
            approx, detail = dwt(data, wavelet, mode)
            assert_reconstructed(idwt(approx, detail, wavelet, mode), data, mode)

    def test_fills_missing_coefficients_with_zeros(self):
        coeffs = [1, -2, 7, 1]
        np.testing.assert_allclose(
            idwt(coeffs, None, "haar"), idwt(coeffs, np.zeros(4), "haar"))
        np.testing.assert_allclose(
            idwt(None, coeffs, "db2"), idwt(np.zeros(4), coeffs, "db2"))

    def test_unequal_lengths(self):
        with pytest.raises(LengthMismatchError):
            idwt([1, 2], [3], "haar")

    def test_zero_length(self):
        with pytest.raises(LengthMismatchError):
            idwt([], [], "haar")

    def test_both_undefined(self):
        with pytest.raises(LengthMismatchError):
            idwt(None, None, "haar")

    def test_unequal_filter_lengths(self, haar_basis):
        basis = with_rec(haar_basis, FilterPair(
            low=haar_basis.rec.low, high=haar_basis.rec.high + (1.0, -1.0)))
        with pytest.raises(FilterLengthMismatchError):
            idwt([1, 2], [3, 4], basis)

    def test_filters_too_short(self, haar_basis):
        basis = with_rec(haar_basis, FilterPair(low=(1.0,), high=(1.0,)))
        with pytest.raises(FilterTooShortError):
            idwt([1, 2], [3, 4], basis)


class TestMaxLevel:
    def test_zero_for_short_data(self):
        assert max_level(0, "haar") == 0
        assert max_level(1, "haar") == 0

    def test_haar_levels(self):
        assert max_level(2, "haar") == 1
        assert max_level(4, "haar") == 2
        assert max_level(1024, "haar") == 10
        for length in range(1, 300):
            assert max_level(length, "haar") == int(math.floor(math.log2(length)))

    def test_daubechies_levels(self):
        assert max_level(5, "db2") == 0
        assert max_level(12, "db2") == 2
        assert max_level(35, "db5") == 1
        assert max_level(36, "db5") == 2

    @pytest.mark.parametrize("wavelet", ALL_WAVELETS)
    def test_matches_pywavelets(self, wavelet):
        filter_length = pywt.Wavelet(wavelet).dec_len
        for length in [1, 3, 17, 100, 1000, 4096]:
            assert max_level(length, wavelet) == pywt.dwt_max_level(length, filter_length)

    def test_non_integer_length(self):
        with pytest.raises(NonIntegerLengthError):
            max_level(3.14, "haar")

    def test_negative_length(self):
        with pytest.raises(NegativeLengthError):
            max_level(-1, "haar")


class TestWavedec:
    @pytest.mark.parametrize("alias", HAAR_ALIASES)
    def test_known_coefficients(self, alias, haar_datasets):
        for dataset in haar_datasets:
            assert_coeffs_close(wavedec(dataset["data"], alias, "zero"), dataset["wavedec"])

    def test_level_zero_returns_data(self):
        coeffs = wavedec([1, 2, 3, 4], "haar", "symmetric", 0)
        assert len(coeffs) == 1
        np.testing.assert_array_equal(coeffs[0], [1, 2, 3, 4])

    def test_level_above_maximum(self):
        with pytest.warns(UserWarning, match="too high"):
            coeffs = wavedec([SQRT2], "haar", "zero", 2)
        assert_coeffs_close(coeffs, [[1 / SQRT2], [1 / SQRT2], [1]])

    def test_maximum_level_does_not_warn(self):
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            wavedec(np.arange(64.0), "db2", "symmetric")

    def test_empty_data(self):
        coeffs = wavedec([], "haar")
        assert len(coeffs) == 1
        assert len(coeffs[0]) == 0

    def test_undefined_data(self):
        with pytest.raises(InvalidDataError):
            wavedec(None, "haar")

    def test_negative_level(self):
        with pytest.raises(NegativeLevelError):
            wavedec([1, 2, 3, 4], "haar", "zero", -1)

    def test_non_integer_level(self):
        with pytest.raises(InvalidLevelError):
            wavedec([1, 2, 3, 4], "haar", "zero", 1.5)

    def test_unequal_filter_lengths(self, haar_basis, haar_datasets):
        basis = with_dec(haar_basis, FilterPair(
            low=haar_basis.dec.low, high=haar_basis.dec.high + (1.0, -1.0)))
        with pytest.raises(FilterLengthMismatchError):
            wavedec(haar_datasets[1]["data"], basis)

    def test_filters_too_short(self, haar_basis, haar_datasets):
        basis = with_dec(haar_basis, FilterPair(low=(1.0,), high=(1.0,)))
        with pytest.raises(FilterTooShortError):
            wavedec(haar_datasets[1]["data"], basis)

    def test_coefficient_lengths(self):
        coeffs = wavedec(np.ones(100), "db3", "symmetric", 3)
        # (n + N - 1) // 2 at each level
        assert [len(c) for c in coeffs] == [16, 16, 28, 52]

    @pytest.mark.parametrize("wavelet", ALL_WAVELETS)
    @pytest.mark.parametrize("mode", ALL_MODES)
    def test_matches_pywavelets(self, wavelet, mode, rng):
        data = rng.normal(size=300)
        coeffs = wavedec(data, wavelet, mode)
        reference = pywt.wavedec(data, wavelet, mode=mode)
        assert len(coeffs) == len(reference)
        for ours, theirs in zip(coeffs, reference):
            np.testing.assert_allclose(ours, theirs, atol=1e-9)


class TestWaverec:
    @pytest.mark.parametrize("alias", HAAR_ALIASES)
    def test_known_coefficients(self, alias, haar_datasets):
        for dataset in haar_datasets:
            np.testing.assert_allclose(
                waverec(dataset["wavedec"], alias, "zero"), dataset["data"], atol=1e-9)

    def test_empty_coefficients(self):
        with pytest.raises(EmptyCoefficientsError):
            waverec([], "haar")
        with pytest.raises(EmptyCoefficientsError):
            waverec(None, "haar")

    def test_single_entry_returns_approximation(self):
        np.testing.assert_array_equal(waverec([[1.0, 2.0, 3.0]], "db2"), [1.0, 2.0, 3.0])

    def test_unequal_filter_lengths(self, haar_basis, haar_datasets):
        basis = with_rec(haar_basis, FilterPair(
            low=haar_basis.rec.low, high=haar_basis.rec.high + (1.0, -1.0)))
        with pytest.raises(FilterLengthMismatchError):
            waverec(haar_datasets[1]["wavedec"], basis)

    def test_filters_too_short(self, haar_basis, haar_datasets):
        basis = with_rec(haar_basis, FilterPair(low=(1.0,), high=(1.0,)))
        with pytest.raises(FilterTooShortError):
            waverec(haar_datasets[1]["wavedec"], basis)

    def test_mismatched_levels(self):
        with pytest.raises(LengthMismatchError):
            waverec([[1.0, 2.0], [1.0, 2.0, 3.0, 4.0]], "haar")

    def test_validates_all_levels_before_reconstruction(self, monkeypatch, rng):
        def fail(*args):
            raise AssertionError("reconstruction started before validation")

        coeffs = wavedec(rng.normal(size=64), "db2", "symmetric", 3)
        monkeypatch.setattr(transform_module, "_idwt", fail)

        truncated = coeffs[:-1] + [coeffs[-1][:-3]]
        with pytest.raises(LengthMismatchError):
            waverec(truncated, "db2")

        non_numeric = coeffs[:-1] + [["a"] * len(coeffs[-1])]
        with pytest.raises(InvalidDataError):
            waverec(non_numeric, "db2")

        empty_detail = coeffs[:-1] + [[]]
        with pytest.raises(LengthMismatchError):
            waverec(empty_detail, "db2")

    def test_odd_length_levels_accepted(self, rng):
        data = rng.normal(size=37)
        coeffs = wavedec(data, "db3", "reflect", 2)
        assert [len(c) for c in coeffs] == [13, 13, 21]
        assert_reconstructed(waverec(coeffs, "db3", "reflect"), data, "reflect")

    @pytest.mark.parametrize("wavelet", ALL_WAVELETS)
    @pytest.mark.parametrize("mode", ALL_MODES)
    def test_round_trip(self, wavelet, mode, rng):
        for length in [1, 2, 3, 8, 13, 64, 101, 256]:
            data = rng.normal(size=length)
            coeffs = wavedec(data, wavelet, mode)
            assert_reconstructed(waverec(coeffs, wavelet, mode), data, mode)

    @pytest.mark.filterwarnings("ignore:Level value")
    @pytest.mark.parametrize("mode", ALL_MODES)
    def test_round_trip_beyond_maximum_level(self, mode, rng):
        data = rng.normal(size=21)
        coeffs = wavedec(data, "db4", mode, 4)
        assert len(coeffs) == 5
        assert_reconstructed(waverec(coeffs, "db4", mode), data, mode)

    @pytest.mark.parametrize("wavelet", ALL_WAVELETS)
    @pytest.mark.parametrize("mode", ALL_MODES)
    def test_matches_pywavelets(self, wavelet, mode, rng):
        data = rng.normal(size=300)
        coeffs = pywt.wavedec(data, wavelet, mode=mode)
        np.testing.assert_allclose(
            waverec(coeffs, wavelet, mode), pywt.waverec(coeffs, wavelet, mode=mode),
            atol=1e-9)


class TestEnergy:
    def test_empty_values(self):
        assert energy([]) == 0
        assert energy([[], [], []]) == 0

    def test_undefined_values(self):
        with pytest.raises(InvalidDataError):
            energy(None)

    @pytest.mark.parametrize("values", [3.0, 7, np.float64(2.0), np.array(1.5), "abc"])
    def test_scalar_values(self, values):
        with pytest.raises(InvalidDataError):
            energy(values)

    @pytest.mark.parametrize("values", [["a", 1], [[1.0, 2.0], [None]], [1.0, {"x": 1}]])
    def test_non_numeric_values(self, values):
        with pytest.raises(InvalidDataError):
            energy(values)

    def test_numpy_values(self):
        assert energy(np.array([[1.0, 2.0], [3.0, 4.0]])) == pytest.approx(30)
        assert energy([np.int64(3), np.float32(4.0)]) == pytest.approx(25)

    def test_data_energy(self, haar_datasets):
        for dataset in haar_datasets:
            assert energy(dataset["data"]) == pytest.approx(dataset["energy"])

    def test_coefficient_energy(self, haar_datasets):
        for dataset in haar_datasets:
            assert energy(dataset["dwt"]) == pytest.approx(dataset["energy"])
            assert energy(dataset["wavedec"]) == pytest.approx(dataset["energy"])

    @pytest.mark.parametrize("wavelet", ALL_WAVELETS)
    def test_conserved_with_zero_padding(self, wavelet, rng):
        data = rng.normal(size=77)
        coeffs = wavedec(data, wavelet, ExtensionMode.ZERO)
        assert energy(coeffs) == pytest.approx(energy(data), rel=1e-9)


class TestDiscreteWaveletTransform:
    def test_forward_inverse(self, rng):
        transform = DiscreteWaveletTransform("db4", "periodic")
        data = rng.normal(size=128)
        coeffs = transform.forward(data, 3)
        assert len(coeffs) == 4
        np.testing.assert_allclose(transform.inverse(coeffs), data, atol=1e-9)

    def test_matches_functions(self, rng):
        transform = DiscreteWaveletTransform("D6", "sp1")
        data = rng.normal(size=50)
        assert transform.mode is ExtensionMode.SMOOTH
        assert transform.filter_length == 6
        approx, detail = transform.dwt(data)
        ref_approx, ref_detail = dwt(data, "db3", "smooth")
        np.testing.assert_array_equal(approx, ref_approx)
        np.testing.assert_array_equal(detail, ref_detail)
        np.testing.assert_array_equal(transform.idwt(approx, detail), idwt(approx, detail, "db3"))
        assert transform.max_level(50) == max_level(50, "db3")

    def test_modes(self):
        assert "antisymmetric" in DiscreteWaveletTransform.modes

    def test_invalid_construction(self, haar_basis):
        with pytest.raises(UnknownWaveletError):
            DiscreteWaveletTransform("morlet")
        with pytest.raises(UnknownModeError):
            DiscreteWaveletTransform("haar", "periodization")
        with pytest.raises(FilterTooShortError):
            DiscreteWaveletTransform(with_rec(haar_basis, FilterPair(low=(1.0,), high=(1.0,))))
