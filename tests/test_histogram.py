import numpy as np

from phred_pipeline.stats.histogram import QualityHistogram


def test_counts_by_score():
    h = QualityHistogram()
    h.record("!!!!")
    h.record("I+")
    assert len(h) == 100
    assert h.counts.dtype == np.uint64
    assert h.counts[0] == 4
    assert h.counts[10] == 1
    assert h.counts[40] == 1
    assert h.total == 6


def test_out_of_range_characters_skipped():
    h = QualityHistogram()
    h.record(" \x1f\x80é!~\x7f")
    # only '!', '~' and DEL fall inside [0x21, 0x7f]
    assert h.total == 3
    assert h.counts[0] == 1
    assert h.counts[93] == 1
    assert h.counts[94] == 1


def test_sum_matches_printable_bases():
    quals = ["IIII5555", "!!+", "", "??\t??"]
    h = QualityHistogram()
    for q in quals:
        h.record(q)
    expected = sum(sum(1 for c in q if 0x21 <= ord(c) <= 0x7F) for q in quals)
    assert h.total == expected == 15


def test_to_frame():
    h = QualityHistogram()
    h.record("5")
    df = h.to_frame()
    assert list(df.columns) == ["phred_score", "count"]
    assert df["phred_score"].tolist() == list(range(100))
    assert int(df.loc[20, "count"]) == 1
