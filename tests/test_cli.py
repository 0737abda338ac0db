"""Tests for the CLI entry point and its HTTP client module."""

import importlib
import json
import sys

import wordbank.cli.client as client
from conftest import make_entry
from wordbank.cli.main import main


def test_client_import_ignores_unrelated_bad_settings(monkeypatch):
    monkeypatch.setenv("WORDBANK_CACHE_SIZE", "bad")
    monkeypatch.setenv("WORDBANK_API_URL", "http://words.example/api")

    reloaded = importlib.reload(client)
    assert reloaded.base_url() == "http://words.example/api"


def test_base_url_follows_environment(monkeypatch):
    monkeypatch.delenv("WORDBANK_API_URL", raising=False)
    assert client.base_url() == "http://localhost:8000/api"

    monkeypatch.setenv("WORDBANK_API_URL", "http://other.example/api")
    assert client.base_url() == "http://other.example/api"


def test_data_chunk_runs_with_bad_cache_size(tmp_path, monkeypatch, capsys):
    dictionary = tmp_path / "dictionary.json"
    dictionary.write_text(json.dumps([make_entry(w).to_dict() for w in ["b", "a", "c"]]))
    out_dir = tmp_path / "chunks"

    monkeypatch.setenv("WORDBANK_CACHE_SIZE", "bad")
    monkeypatch.setattr(sys, "argv", ["wordbank", "data", "chunk", str(dictionary), str(out_dir), "--size", "2"])
    main()

    assert "✓ Created 2 chunks" in capsys.readouterr().out
    index = json.loads((out_dir / "index.json").read_text())
    assert [e["firstWord"] for e in index] == ["a", "c"]
