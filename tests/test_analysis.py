"""Tests for framing and autocorrelation pitch estimation."""

import numpy as np
import pytest

from melody_notes.analysis import Framer, PitchEstimator, estimate_frequency, hann_window
from melody_notes.analysis.framing import frame
from melody_notes.core import InvalidParameters, SampleBuffer, freq_to_midi

from generate_test_audio import SR, A3, A4, B4, generate_silence, generate_sine_wave


class TestFramer:
    """Tests for Framer."""

    def test_frame_offsets(self):
        framer = Framer(np.arange(10, dtype=float), frame_size=4, hop=3)
        assert framer.frame_count == 3  # offsets 0, 3, 6; 6 + 4 == 10 still fits
        assert [framer.offset(i) for i in range(3)] == [0, 3, 6]
        assert len(list(framer)) == 3

    def test_trailing_partial_frame_dropped(self):
        framer = Framer(np.ones(11), frame_size=4, hop=3)
        assert framer.frame_count == 3

    def test_empty_buffer(self):
        framer = Framer(SampleBuffer.from_array([], SR), frame_size=2048, hop=256)
        assert framer.frame_count == 0
        assert list(framer) == []

    def test_buffer_shorter_than_frame(self):
        assert list(Framer(np.ones(100), frame_size=2048, hop=256)) == []

    def test_hann_window_applied(self):
        frames = list(Framer(np.ones(16), frame_size=8, hop=8))
        assert len(frames) == 2
        i = np.arange(8)
        expected = 0.5 - 0.5 * np.cos(2 * np.pi * i / 7)
        for f in frames:
            np.testing.assert_allclose(f, expected, atol=1e-12)
        assert frames[0][0] == pytest.approx(0.0)
        assert frames[0][-1] == pytest.approx(0.0)

    def test_window_matches_samples(self):
        samples = np.linspace(-1, 1, 12)
        frames = list(frame(samples, 6, 2))
        np.testing.assert_allclose(frames[1], samples[2:8] * hann_window(6))

    def test_restartable(self):
        framer = Framer(np.random.randn(1000), frame_size=128, hop=64)
        first = list(framer)
        second = list(framer)
        assert len(first) == len(second) == framer.frame_count
        for a, b in zip(first, second):
            np.testing.assert_array_equal(a, b)

    def test_buffer_not_modified(self):
        samples = np.ones(64)
        for f in Framer(samples, frame_size=32, hop=16):
            f *= 0.0
        np.testing.assert_array_equal(samples, np.ones(64))

    @pytest.mark.parametrize("frame_size,hop", [(2048, 0), (0, 256), (2048, -1)])
    def test_non_positive_sizes_rejected(self, frame_size, hop):
        with pytest.raises(InvalidParameters):
            Framer(np.ones(4096), frame_size=frame_size, hop=hop)


class TestPitchEstimator:
    """Tests for PitchEstimator."""

    @pytest.fixture
    def estimator(self):
        return PitchEstimator(sample_rate=SR, min_freq_hz=80.0, max_freq_hz=1000.0)

    def _windowed(self, freq: float, size: int = 2048) -> np.ndarray:
        return generate_sine_wave(freq, size / SR)[:size] * hann_window(size)

    def test_lag_bounds(self, estimator):
        assert estimator.min_lag == 44
        assert estimator.max_lag == 551

    def test_a4(self, estimator):
        freq = estimator.estimate(self._windowed(A4))
        assert freq == pytest.approx(A4, rel=0.01)
        assert freq_to_midi(freq) == 69

    def test_b4(self, estimator):
        assert freq_to_midi(estimator.estimate(self._windowed(B4))) == 71

    def test_a3(self, estimator):
        assert freq_to_midi(estimator.estimate(self._windowed(A3))) == 57

    def test_silence_has_no_pitch(self, estimator):
        assert estimator.estimate(np.zeros(2048)) is None

    def test_max_lag_beyond_frame_has_no_pitch(self, estimator):
        # max_lag is 551 samples; a 300-sample frame cannot hold it
        assert estimator.estimate(self._windowed(A4, size=300)) is None

    def test_correlation_is_plain_sum(self, estimator):
        rng = np.random.default_rng(0)
        frame_ = rng.standard_normal(1024)
        corr = estimator.correlation(frame_)
        for lag in (0, 44, 100, 551):
            expected = np.dot(frame_[: len(frame_) - lag], frame_[lag:])
            assert corr[lag] == pytest.approx(expected, rel=1e-9, abs=1e-9)

    @pytest.mark.parametrize("seed", range(5))
    def test_burst_shorter_than_min_lag_has_no_pitch(self, estimator, seed):
        # 30 nonzero samples cannot overlap themselves at any lag >= 44
        rng = np.random.default_rng(seed)
        frame_ = np.zeros(2048)
        frame_[1000:1030] = rng.standard_normal(30)
        corr = estimator.correlation(frame_)
        assert np.all(corr[estimator.min_lag:estimator.max_lag + 1] == 0.0)
        assert estimator.estimate(frame_) is None

    def test_estimate_all_keeps_order(self, estimator):
        frames = [self._windowed(A4), np.zeros(2048), self._windowed(A3)]
        estimates = estimator.estimate_all(frames)
        assert len(estimates) == 3
        assert freq_to_midi(estimates[0]) == 69
        assert estimates[1] is None
        assert freq_to_midi(estimates[2]) == 57

    def test_functional_form(self):
        freq = estimate_frequency(self._windowed(A4), SR, 80.0, 1000.0)
        assert freq_to_midi(freq) == 69

    def test_normalized_mode(self):
        estimator = PitchEstimator(SR, 80.0, 1000.0, normalized=True)
        assert estimator.estimate(np.zeros(2048)) is None
        freq = estimator.estimate(self._windowed(A4))
        assert freq is not None
        assert 80.0 <= freq <= 1000.0 * 1.1

    @pytest.mark.parametrize(
        "sample_rate, fmin, fmax",
        [(0, 80.0, 1000.0), (SR, 0.0, 1000.0), (SR, 500.0, 400.0), (SR, 80.0, 80.0), (800, 80.0, 1000.0)],
    )
    def test_invalid_parameters(self, sample_rate, fmin, fmax):
        with pytest.raises(InvalidParameters):
            PitchEstimator(sample_rate, fmin, fmax)

    def test_silent_buffer_frames(self, estimator):
        framer = Framer(generate_silence(0.5), 2048, 256)
        assert all(f is None for f in estimator.estimate_all(framer))
