import io

import pytest

from tokenrank.core.report.sinks import StreamSink
from tokenrank.schemas.run_config import RunConfig
from tokenrank.services.analysis_service import build_service, read_text
from tokenrank.utils.exceptions import InputReadError

TEXT = "The cat sat. The cat ran."


def _config(**flags) -> RunConfig:
    return RunConfig(input_path="unused.txt", **flags)


def test_lowercased_scenario_ranking():
    result = build_service(_config(lowercase=True)).analyze(TEXT)
    assert result.entries == [(2, "the"), (2, "cat"), (1, "sat"), (1, "ran")]
    assert result.total_tokens == 6
    assert result.counts() == [2, 2, 1, 1]


def test_stopwords_removed_scenario():
    result = build_service(_config(lowercase=True, remove_stopwords=True)).analyze(
        TEXT
    )
    assert "the" not in [e.token for e in result.entries]
    assert result.entries == [(2, "cat"), (1, "sat"), (1, "ran")]
    assert sum(result.counts()) == result.total_tokens == 4
    assert result.stopword_count > 0


def test_stopwords_without_lowercase_keep_capitalised_token():
    result = build_service(_config(remove_stopwords=True)).analyze(TEXT)
    assert (2, "The") in result.entries


def test_stemming_merges_inflections():
    result = build_service(_config(lowercase=True, stem=True)).analyze(
        "Cats cat running runs run"
    )
    assert result.entries == [(3, "run"), (2, "cat")]


def test_retained_punctuation_becomes_tokens():
    result = build_service(_config(strip_punctuation=False)).analyze("Hi, hi.")
    assert result.entries == [(1, "hi"), (1, "Hi"), (1, "."), (1, ",")]


def test_proper_noun_scenario():
    text = "Alice met Bob. Alice saw the bob cat. Alice 3rd."
    result = build_service(_config(lowercase=True, proper_noun_filter=True)).analyze(
        text
    )
    assert result.entries == [(3, "alice")]
    assert "bob" in result.evidence


def test_proper_noun_output_is_subset_of_unfiltered():
    text = "Rome is old. Rome and Paris. paris is big. Rome Paris Oslo"
    base = build_service(_config(lowercase=True)).analyze(text)
    filtered = build_service(_config(lowercase=True, proper_noun_filter=True)).analyze(
        text
    )
    assert set(filtered.entries) <= set(base.entries)
    assert filtered.entries == [(3, "rome")]


def test_proper_nouns_with_retained_punctuation():
    result = build_service(
        _config(strip_punctuation=False, proper_noun_filter=True)
    ).analyze("Bob met Alice. Bob ran. I saw bob.")
    assert result.evidence == frozenset({"met", "ran", "saw", "bob"})
    assert result.entries == []


def test_proper_nouns_with_retained_punctuation_keeps_real_names():
    result = build_service(
        _config(strip_punctuation=False, proper_noun_filter=True)
    ).analyze("Oslo, Norway. Oslo! Visit Norway?")
    assert result.entries == [(2, "Oslo"), (2, "Norway")]


def test_proper_nouns_compare_stems_with_stemmed_evidence():
    result = build_service(_config(stem=True, proper_noun_filter=True)).analyze(
        "Runs daily. Runs again. He runs."
    )
    assert "run" in result.evidence
    assert result.entries == []


def test_proper_nouns_survive_stemming():
    result = build_service(_config(stem=True, proper_noun_filter=True)).analyze(
        "Paris rains. Paris shines."
    )
    assert result.entries == [(2, "pari")]


def test_stopwords_match_word_tokens_with_retained_punctuation():
    result = build_service(
        _config(strip_punctuation=False, lowercase=True, remove_stopwords=True)
    ).analyze("The cat, the dog.")
    assert result.entries == [(1, "dog"), (1, "cat"), (1, "."), (1, ",")]
    assert sum(result.counts()) == result.total_tokens == 4


def test_empty_text():
    service = build_service(_config())
    result = service.analyze("")
    assert result.entries == []
    assert result.counts() == []
    assert result.to_frame().empty

    buf = io.StringIO()
    assert service.write_report(result, StreamSink(buf)) == 0
    assert buf.getvalue() == ""


def test_to_frame_ranks_from_one():
    df = build_service(_config(lowercase=True)).analyze(TEXT).to_frame()
    assert df.columns.tolist() == ["rank", "count", "token"]
    assert df["rank"].tolist() == [1, 2, 3, 4]
    assert df["token"].tolist() == ["the", "cat", "sat", "ran"]


def test_run_config_is_frozen():
    config = _config()
    with pytest.raises(Exception):
        config.lowercase = True


# -------------------------------------
# ❌ Input errors
# -------------------------------------
def test_read_text_missing_file(tmp_path):
    with pytest.raises(InputReadError) as exc:
        read_text(tmp_path / "nope.txt")
    assert exc.value.code == "INPUT_NOT_READABLE"


def test_read_text_binary_file(tmp_path):
    path = tmp_path / "blob.bin"
    path.write_bytes(b"\xff\xfe\xfa\x00")
    with pytest.raises(InputReadError) as exc:
        read_text(path)
    assert exc.value.code == "INPUT_NOT_TEXT"
