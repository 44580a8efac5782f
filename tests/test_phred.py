import math
import subprocess
import sys

import numpy as np
import pytest

from phred_pipeline.core.phred import (
    PHRED_TO_ERROR_PROB, PHRED_TABLE_SIZE, lookup, check_phred_range,
    quality_to_phred, error_probability_to_phred,
)
from phred_pipeline.core.analysis import (
    ReadStats, extract_read_id, compute_statistics, analyse_read,
)


def test_table_values_and_order():
    assert PHRED_TO_ERROR_PROB.size == PHRED_TABLE_SIZE == 100
    for i in range(94):
        assert PHRED_TO_ERROR_PROB[i] == pytest.approx(10 ** (-i / 10), rel=1e-12)
    assert np.all(np.diff(PHRED_TO_ERROR_PROB) < 0)


def test_table_is_read_only():
    with pytest.raises(ValueError):
        PHRED_TO_ERROR_PROB[0] = 0.5


def test_lookup_bounds():
    assert lookup(0) == 1.0
    assert lookup(10) == pytest.approx(0.1)
    with pytest.raises(IndexError):
        lookup(-1)
    with pytest.raises(IndexError):
        lookup(PHRED_TABLE_SIZE)


def test_phred_round_trip():
    for i in range(PHRED_TABLE_SIZE):
        assert error_probability_to_phred(PHRED_TO_ERROR_PROB[i]) == pytest.approx(i, abs=1e-9)


def test_phred_edge_values():
    assert math.copysign(1.0, error_probability_to_phred(1.0)) == 1.0
    assert error_probability_to_phred(0.0) == math.inf


def test_quality_to_phred():
    assert quality_to_phred("!+5?I").tolist() == [0, 10, 20, 30, 40]


# --------------------------------------------------------------------------
@pytest.mark.parametrize("header,expected", [
    ("@read1 extra info", "read1"),
    ("@read1", "@read1"),
    ("@read1\tlane=2", "@read1\tlane=2"),
    (" extra", "NaN"),
    ("@ extra", ""),
    ("@m54/1/ccs 1:N:0", "m54/1/ccs"),
])
def test_extract_read_id(header, expected):
    assert extract_read_id(header) == expected


def test_compute_statistics_length_and_mean():
    for q in ["!", "IIII", "!+5?I", "#" * 150]:
        mean_err, n = compute_statistics(q)
        assert n == len(q)
    mean_err, n = compute_statistics("!+")
    assert mean_err == pytest.approx((1.0 + 0.1) / 2)


def test_compute_statistics_does_not_filter():
    # ASCII 127 is scored (Q94) like every other character
    mean_err, n = compute_statistics("\x7f")
    assert n == 1
    assert mean_err == pytest.approx(10 ** -9.4)


def test_compute_statistics_out_of_table():
    with pytest.raises(IndexError):
        compute_statistics("II\x1fII")


def test_compute_statistics_empty():
    mean_err, n = compute_statistics("")
    assert n == 0
    assert math.isnan(mean_err)


def test_analyse_read_mean_phred_is_not_mean_of_scores():
    stats = analyse_read("@r2 x", "!I")
    assert isinstance(stats, ReadStats)
    assert stats.read_id == "r2"
    assert stats.read_length == 2
    # mean error (1 + 1e-4) / 2 → Q ≈ 3.01, not (0 + 40) / 2
    assert stats.mean_phred == pytest.approx(-10 * math.log10((1 + 1e-4) / 2))


def test_check_phred_range():
    check_phred_range(0)
    check_phred_range(np.array([0, 50, 99]))
    with pytest.raises(IndexError, match="Phred score -2"):
        check_phred_range(np.array([3, -2, 120]))
    with pytest.raises(IndexError, match="Phred score 100"):
        check_phred_range(100)


def test_compute_statistics_sums_sequentially():
    quality = "".join(chr(33 + (i * 7) % 42) for i in range(257))
    total = 0.0
    for c in quality:
        total += float(PHRED_TO_ERROR_PROB[ord(c) - 33])
    mean_err, n = compute_statistics(quality)
    assert n == 257
    assert mean_err == total / n


def test_import_leaves_matplotlib_backend_alone():
    code = ("import matplotlib; matplotlib.use('pdf'); "
            "import phred_pipeline; print(matplotlib.get_backend())")
    out = subprocess.run([sys.executable, "-c", code], capture_output=True, text=True, check=True)
    assert out.stdout.strip() == "pdf"
