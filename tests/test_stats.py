"""Tests unitarios para el submodulo de calculo estadistico.

Verifica:
- Media, mediana, desviacion poblacional y MAD
- Normalizacion clasica y robusta (incluidos los casos degenerados)
- Conteo de spikes por umbral
- Envolvente binomial y veredicto H0
"""

import math

import numpy as np
import pytest

from binomial.models import Envelope
from binomial.stats import (
    BaseNormalizer,
    RobustNormalizer,
    StandardNormalizer,
    count_outliers,
    estimate,
    get_normalizer,
    mean,
    median,
    median_absolute_deviation,
    population_sd,
    within_envelope,
    z_normalize,
)


# Tests para estadistica descriptiva
class TestDescriptive:
    """Tests para mean(), median(), population_sd() y MAD."""

    def test_mean(self):
        assert mean([1.0, 2.0, 3.0, 4.0]) == 2.5

    def test_median_even_length(self):
        """Longitud par: promedio de los dos centrales."""
        assert median([1.0, 2.0, 3.0, 4.0]) == 2.5

    def test_median_odd_length(self):
        """Longitud impar: el valor central."""
        assert median([1.0, 2.0, 3.0]) == 2.0

    def test_median_unsorted_input(self):
        assert median([9.0, 1.0, 5.0, 3.0, 7.0]) == 5.0

    def test_median_does_not_mutate_input(self):
        """La mediana ordena una copia."""
        xs = [3.0, 1.0, 2.0]
        median(xs)
        assert xs == [3.0, 1.0, 2.0]

    def test_population_sd_reference_example(self):
        """Ejemplo clasico: desviacion poblacional 2."""
        assert population_sd([2, 4, 4, 4, 5, 5, 7, 9]) == pytest.approx(2.0)

    def test_population_sd_uses_n_divisor(self):
        """Divisor n, no n-1."""
        assert population_sd([1.0, 3.0]) == pytest.approx(1.0)

    def test_population_sd_constant_series(self):
        assert population_sd([5.0, 5.0, 5.0]) == 0.0

    def test_mad(self):
        """Mediana 3, desviaciones [2, 1, 0, 1, 97] -> MAD 1."""
        assert median_absolute_deviation([1.0, 2.0, 3.0, 4.0, 100.0]) == 1.0


# Tests para normalizacion
class TestNormalizer:
    """Tests para StandardNormalizer, RobustNormalizer y z_normalize()."""

    def test_base_normalizer_is_abstract(self):
        """BaseNormalizer no se puede instanciar."""
        with pytest.raises(TypeError):
            BaseNormalizer()

    def test_get_normalizer(self):
        assert isinstance(get_normalizer(False), StandardNormalizer)
        assert isinstance(get_normalizer(True), RobustNormalizer)

    def test_standard_zscores(self):
        """Media 5 y desviacion 2."""
        zn = z_normalize([2, 4, 4, 4, 5, 5, 7, 9])
        np.testing.assert_array_almost_equal(zn, [-1.5, -0.5, -0.5, -0.5, 0.0, 0.0, 1.0, 2.0])

    def test_robust_zscores(self):
        """Mediana 3 y MAD 1: z = 0.6745 * (x - 3)."""
        zn = z_normalize([1.0, 2.0, 3.0, 4.0, 100.0], robust=True)
        np.testing.assert_array_almost_equal(
            zn, [-1.349, -0.6745, 0.0, 0.6745, 0.6745 * 97]
        )

    @pytest.mark.parametrize("robust", [False, True])
    def test_preserves_length_and_order(self, robust):
        xs = [4.0, -1.0, 7.5, 3.0, 0.0, 12.0]
        zn = z_normalize(xs, robust=robust)
        assert len(zn) == len(xs)
        assert int(np.argmax(zn)) == 5
        assert int(np.argmin(zn)) == 1

    @pytest.mark.parametrize("shift", [-1000.0, -3.5, 0.0, 0.25, 42.0, 1e6])
    @pytest.mark.parametrize("xs", [
        [1.0, 2.0, 3.0, 4.0, 10.0],
        [0.5, -2.0, 3.25, 8.0, 8.0, -1.0],
        [100.0, 101.0, 99.0, 100.5],
    ])
    def test_standard_zscores_are_shift_invariant(self, xs, shift):
        """z(x + c) == z(x) para cualquier constante c."""
        shifted = [x + shift for x in xs]
        np.testing.assert_allclose(z_normalize(shifted), z_normalize(xs), atol=1e-6)

    def test_input_is_not_mutated(self):
        xs = [3.0, 1.0, 2.0, 10.0]
        z_normalize(xs, robust=True)
        z_normalize(xs)
        assert xs == [3.0, 1.0, 2.0, 10.0]

    # =========================================================================
    # Casos degenerados: dispersion nula
    # =========================================================================

    def test_constant_series_standard_is_nan(self):
        """Varianza 0: todos los Z-scores son NaN (0/0), sin corregir."""
        zn = z_normalize([5.0, 5.0, 5.0, 5.0])
        assert np.all(np.isnan(zn))

    def test_constant_series_robust_is_nan(self):
        zn = z_normalize([5.0, 5.0, 5.0, 5.0], robust=True)
        assert np.all(np.isnan(zn))

    def test_zero_mad_with_deviating_value(self):
        """MAD 0 pero un valor distinto: NaN en los iguales, inf en el distinto."""
        zn = z_normalize([1.0, 1.0, 1.0, 1.0, 5.0], robust=True)
        assert np.all(np.isnan(zn[:4]))
        assert np.isinf(zn[4]) and zn[4] > 0

    def test_degenerate_output_is_not_finite(self):
        """La salida degenerada se documenta como no finita."""
        zn = z_normalize([2.0, 2.0, 2.0])
        assert not np.any(np.isfinite(zn))


# Tests para el conteo de spikes
class TestCountOutliers:
    """Tests para count_outliers()."""

    def test_threshold_is_inclusive(self):
        """Un |z| igual al umbral cuenta como spike."""
        assert count_outliers([-2.0, 2.0, 1.999, 0.0], 2.0) == 2

    def test_uses_absolute_value(self):
        assert count_outliers([-3.0, 3.0, -0.5], 2.5) == 2

    @pytest.mark.parametrize("threshold", [0.0, -0.5, -1.0, -100.0])
    def test_non_positive_threshold_counts_everything(self, threshold):
        """Con umbral <= 0 todo valor finito es spike."""
        zn = [0.0, 1.0, -3.0, 0.1, -0.0]
        assert count_outliers(zn, threshold) == len(zn)

    def test_subrange_is_half_open(self):
        """[lo, hi): incluye lo y excluye hi."""
        zn = [3.0, 0.0, 3.0, 0.0, 3.0]
        assert count_outliers(zn, 2.0, (1, 4)) == 1
        assert count_outliers(zn, 2.0, (0, 4)) == 2
        assert count_outliers(zn, 2.0, (0, 5)) == 3

    def test_nan_never_counts(self):
        """|NaN| >= t es falso incluso con umbral 0."""
        assert count_outliers([math.nan, 3.0, math.nan], 0.0) == 1

    def test_infinity_counts(self):
        assert count_outliers([math.inf, -math.inf, 1.0], 2.0) == 2

    def test_infinite_threshold_counts_nothing_finite(self):
        assert count_outliers([1e300, -5.0], math.inf) == 0

    def test_accepts_numpy_arrays(self):
        assert count_outliers(np.array([2.5, -2.5, 0.0]), 2.0) == 2


# Tests para la envolvente binomial
class TestEnvelope:
    """Tests para estimate() y within_envelope()."""

    def test_reference_envelope(self):
        """n=10, p=0.4: media 4, sqrt(2.4) ~ 1.55 -> [2, 6]."""
        env = estimate(10, 0.4)
        assert env.mean == pytest.approx(4.0)
        assert env.low == 2.0
        assert env.high == 6.0

    def test_zero_rate(self):
        """Sin spikes en la poblacion el intervalo es [0, 0]."""
        env = estimate(10, 0.0)
        assert (env.low, env.high) == (0.0, 0.0)

    def test_full_rate(self):
        """p=1: desviacion nula, intervalo [n, n]."""
        env = estimate(10, 1.0)
        assert (env.low, env.high) == (10.0, 10.0)

    def test_zero_trials(self):
        env = estimate(0, 0.3)
        assert (env.low, env.high) == (0.0, 0.0)

    def test_bounds_are_integral(self):
        env = estimate(37, 0.137)
        assert env.low == math.floor(env.low)
        assert env.high == math.ceil(env.high)

    @pytest.mark.parametrize("n", [0, 1, 3, 10, 57, 1000])
    @pytest.mark.parametrize("p", [0.0, 0.01, 0.1, 0.25, 0.5, 0.77, 0.99, 1.0])
    def test_envelope_is_symmetric_up_to_rounding(self, n, p):
        """low y high equidistan de la media salvo el redondeo hacia fuera."""
        env = estimate(n, p)
        spread = math.sqrt(n * p * (1.0 - p))
        below = env.mean - env.low
        above = env.high - env.mean
        assert spread - 1e-9 <= below < spread + 1.0 + 1e-9
        assert spread - 1e-9 <= above < spread + 1.0 + 1e-9

    # =========================================================================
    # Veredicto H0
    # =========================================================================

    def test_count_inside_envelope(self):
        env = Envelope(mean=4.0, low=2.0, high=6.0)
        assert within_envelope(4, env) is True

    def test_bounds_are_inclusive(self):
        env = Envelope(mean=4.0, low=2.0, high=6.0)
        assert within_envelope(2, env) is True
        assert within_envelope(6, env) is True

    def test_count_outside_envelope(self):
        env = Envelope(mean=4.0, low=2.0, high=6.0)
        assert within_envelope(1, env) is False
        assert within_envelope(7, env) is False

    def test_nan_envelope_keeps_h0(self):
        """Comparar con NaN siempre es falso: H0 se mantiene."""
        env = Envelope(mean=math.nan, low=math.nan, high=math.nan)
        assert within_envelope(3, env) is True
