"""
Command-line flow: output format and exit codes.
"""

import io
from unittest.mock import patch

import pytest

from conftest import CAT_CLAWS, CAT_QUERY, CAT_SLEEP, StubEmbedding
from factrag import cli


class FakeStdin(io.StringIO):
    def isatty(self):
        return False


@pytest.fixture(autouse=True)
def ollama_health():
    """Ollama counts as reachable unless a test says otherwise."""
    with patch("factrag.cli.check_ollama_health", return_value=True) as health:
        yield health


@pytest.fixture
def corpus(tmp_path):
    path = tmp_path / "cat-facts.txt"
    path.write_text(f"{CAT_SLEEP}\n\n{CAT_CLAWS}\n", encoding="utf-8")
    return path


def test_answers_question_with_scores(corpus, cat_embeddings, capsys):
    with patch("factrag.core.config.get_embedding_provider", return_value=cat_embeddings):
        exit_code = cli.main([
            "--corpus", str(corpus),
            "--chat-provider", "mock",
            "--top-n", "2",
            "--question", CAT_QUERY,
        ])

    out = capsys.readouterr().out
    assert exit_code == 0
    assert out.splitlines() == [
        "Loaded 2 entries",
        "Retrieved knowledge:",
        f" - (similarity: 0.90) {CAT_SLEEP}",
        f" - (similarity: 0.30) {CAT_CLAWS}",
        "Chatbot response:",
        CAT_SLEEP,
    ]


def test_reads_piped_question(corpus, capsys):
    exit_code = cli.main(
        ["--corpus", str(corpus), "--embed-provider", "hash", "--chat-provider", "mock", "--top-n", "1"],
        stdin=FakeStdin(f"{CAT_CLAWS}\n"),
    )

    out = capsys.readouterr().out
    assert exit_code == 0
    assert f" - (similarity: 1.00) {CAT_CLAWS}" in out


def test_missing_corpus_exits_non_zero(tmp_path):
    exit_code = cli.main([
        "--corpus", str(tmp_path / "missing.txt"),
        "--embed-provider", "hash",
        "--chat-provider", "mock",
        "--question", "anything",
    ])

    assert exit_code == 1


def test_ingestion_failure_exits_non_zero(corpus, capsys):
    failing = StubEmbedding({CAT_SLEEP: [1.0, 0.0]}, fail_on=[CAT_CLAWS])

    with patch("factrag.core.config.get_embedding_provider", return_value=failing):
        exit_code = cli.main(["--corpus", str(corpus), "--chat-provider", "mock", "--question", CAT_QUERY])

    assert exit_code == 1
    assert "Chatbot response:" not in capsys.readouterr().out


def test_empty_question_exits_non_zero(corpus):
    """An empty pipe falls back to the prompt, which hits EOF."""
    with patch("builtins.input", side_effect=EOFError):
        exit_code = cli.main(
            ["--corpus", str(corpus), "--embed-provider", "hash", "--chat-provider", "mock"],
            stdin=FakeStdin(""),
        )

    assert exit_code == 1


def test_top_n_must_be_positive(corpus, capsys, caplog):
    exit_code = cli.main(["--corpus", str(corpus), "--top-n", "0", "--question", "q"])

    assert exit_code == 2
    assert "TOP_N must be >= 1" in caplog.text
    assert capsys.readouterr().out == ""


def test_out_of_range_temperature_is_rejected_before_any_call(corpus, ollama_health, caplog):
    with patch("factrag.core.config.get_chat_provider") as get_chat_provider:
        exit_code = cli.main(["--corpus", str(corpus), "--temperature", "5", "--question", "q"])

    assert exit_code == 2
    assert "CHAT_TEMPERATURE must be between 0 and 2" in caplog.text
    get_chat_provider.assert_not_called()
    ollama_health.assert_not_called()


def test_unreachable_ollama_exits_before_ingestion(corpus, ollama_health, capsys, caplog):
    ollama_health.return_value = False

    with patch("factrag.core.config.get_embedding_provider") as get_embedding_provider:
        exit_code = cli.main(["--corpus", str(corpus), "--question", CAT_QUERY])

    assert exit_code == 1
    assert "Ollama is not reachable" in caplog.text
    assert "Loaded" not in capsys.readouterr().out
    get_embedding_provider.assert_not_called()


def test_offline_providers_skip_health_check(corpus, ollama_health):
    exit_code = cli.main([
        "--corpus", str(corpus),
        "--embed-provider", "hash",
        "--chat-provider", "mock",
        "--question", CAT_QUERY,
    ])

    assert exit_code == 0
    ollama_health.assert_not_called()


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
