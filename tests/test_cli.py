"""
Tests for CLI Commands
======================
Tests for the namekit CLI interface in namekit/cli.py.
"""

import argparse
import json
import pytest
import sys
import subprocess
from pathlib import Path

# Ensure repo root is on path
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from namekit.cli import build_generator, main, read_corpus
from namekit.generators import DelimiterSequencingStrategy

BOB_ARGS = ['--samples', 'Bob,Gobob,Bobby', '--min', '3', '--max', '7', '--seed', 'Test1234567890']


class TestCLIBasic:
    """Basic CLI tests."""

    def test_version_flag(self):
        """Test --version flag."""
        result = subprocess.run(
            [sys.executable, "-m", "namekit", "--version"],
            capture_output=True,
            text=True,
            cwd=str(ROOT),
        )
        assert result.returncode == 0
        assert "namekit" in result.stdout.lower()

    def test_help_flag(self):
        """Test --help flag."""
        result = subprocess.run(
            [sys.executable, "-m", "namekit", "--help"],
            capture_output=True,
            text=True,
            cwd=str(ROOT),
        )
        assert result.returncode == 0
        assert "generate" in result.stdout.lower()
        assert "analyze" in result.stdout.lower()

    def test_no_command(self, capsys):
        """Test running without a command prints help."""
        assert main([]) == 0
        assert "generate" in capsys.readouterr().out

    def test_generate_subprocess(self):
        """Test generate end to end through the module entry point."""
        result = subprocess.run(
            [sys.executable, "-m", "namekit", "generate", "-p", "borderlands", "-n", "3", "--json"],
            capture_output=True,
            text=True,
            cwd=str(ROOT),
            timeout=60,
        )
        assert result.returncode == 0
        assert len(json.loads(result.stdout)) == 3


class TestCLIGenerate:
    """Tests for generate command."""

    def test_generate_json(self, capsys):
        """Test JSON output with an inline sample set."""
        assert main(['generate', *BOB_ARGS, '-n', '3', '--json']) == 0
        names = json.loads(capsys.readouterr().out)
        assert len(names) == 3
        assert len(set(names)) == 3
        # capitalize defaults to on (app.yaml)
        assert all(name[0].isupper() for name in names)

    def test_generate_reproducible(self, capsys):
        """Test the same seed gives the same names."""
        main(['generate', *BOB_ARGS, '-n', '3', '--json'])
        first = capsys.readouterr().out
        main(['generate', *BOB_ARGS, '-n', '3', '--json'])
        assert capsys.readouterr().out == first

    def test_no_capitalize(self, capsys):
        """Test --no-capitalize leaves words lowercase."""
        assert main(['generate', *BOB_ARGS, '-n', '3', '--json', '--no-capitalize']) == 0
        names = json.loads(capsys.readouterr().out)
        assert all(name == name.lower() for name in names)

    def test_generate_table(self, capsys):
        """Test the human-readable output."""
        assert main(['generate', *BOB_ARGS, '-n', '2']) == 0
        out = capsys.readouterr().out
        assert "Generating 2 names" in out
        assert "Test1234567890" in out

    def test_generate_profile(self, capsys):
        """Test generation from a bundled profile."""
        assert main(['generate', '-p', 'sylvan', '-n', '5', '--json']) == 0
        assert len(json.loads(capsys.readouterr().out)) == 5

    def test_generate_corpus_file(self, tmp_path, capsys):
        """Test samples read from a text file."""
        corpus = tmp_path / 'names.txt'
        corpus.write_text("# towns\nMarlow\n\nFenwick\nAshby\nRothwell\n", encoding='utf-8')
        assert main(['generate', '--corpus', str(corpus), '-n', '3', '--seed', 'x', '--json']) == 0
        assert len(json.loads(capsys.readouterr().out)) == 3

    def test_random_seed_reported(self, capsys):
        """Test --random-seed reports the seed it used."""
        assert main(['generate', '--samples', 'Bob,Gobob,Bobby', '--min', '3', '--max', '7',
                     '-n', '2', '--json', '--random-seed']) == 0
        captured = capsys.readouterr()
        assert "Seed:" in captured.err
        assert len(json.loads(captured.out)) == 2

    def test_preserve_case_rejected_for_delimiter_profile(self, capsys):
        """Test --preserve-case does not swap out a delimiter profile's strategy."""
        assert main(['generate', '-p', 'sylvan', '--preserve-case', '-n', '2', '--json']) == 1
        assert "--preserve-case" in capsys.readouterr().err

    def test_preserve_case_keeps_profile_depth(self, tmp_path, capsys):
        """Test --preserve-case keeps the profile's own char depth."""
        path = tmp_path / 'profiles.yaml'
        path.write_text(
            "profiles:\n"
            "  - id: towns\n"
            "    sample_set: [Marlow]\n"
            "    target_length_min: 6\n"
            "    target_length_max: 6\n"
            "    sequencing_strategy: CHAR_DEPTH\n"
            "    sequencing_strategy_settings: {depth: 3}\n",
            encoding='utf-8',
        )
        assert main(['analyze', '-f', str(path), '-p', 'towns', '--preserve-case', '--json']) == 0
        chars = {row['chars'] for row in json.loads(capsys.readouterr().out)}
        assert chars == {'Mar', 'low'}

    def test_build_generator_keeps_delimiter(self):
        """Test a delimiter profile keeps its strategy when only lengths are overridden."""
        args = argparse.Namespace(
            profile='sylvan', file=None, corpus=None, samples=None,
            depth=None, delimiter=None, preserve_case=False,
            min_length=4, max_length=None, seed=None,
            capitalize=None, random_seed=False,
        )
        generator = build_generator(args)
        assert isinstance(generator.sequencing_strategy, DelimiterSequencingStrategy)
        assert generator.sequencing_strategy.delimiter == '-'

    def test_unknown_profile(self, capsys):
        """Test an unknown profile fails with exit code 1."""
        assert main(['generate', '-p', 'nope']) == 1
        assert "Unknown profile" in capsys.readouterr().err

    def test_missing_source(self, capsys):
        """Test generate without a sample set fails."""
        assert main(['generate', '-n', '3']) == 1
        assert "--samples" in capsys.readouterr().err

    def test_invalid_depth(self, capsys):
        """Test configuration errors are reported, not raised."""
        assert main(['generate', *BOB_ARGS, '--depth', '0']) == 1
        assert "depth" in capsys.readouterr().err

    def test_exhaustion(self, capsys):
        """Test an unreachable target fails with exit code 1."""
        assert main(['generate', '--samples', 'ab', '--min', '5', '--max', '5', '-n', '1']) == 1
        assert "Maximum number of tries" in capsys.readouterr().err


class TestCLIAnalyze:
    """Tests for analyze command."""

    def test_analyze_json(self, capsys):
        """Test per-token statistics."""
        assert main(['analyze', *BOB_ARGS, '--json']) == 0
        stats = {row['chars']: row for row in json.loads(capsys.readouterr().out)}
        assert set(stats) == {'bo', 'b', 'go', 'bb', 'y'}
        assert stats['bo']['frequency_beginning'] == 2
        assert stats['bo']['probability_beginning'] == pytest.approx(2 / 3)

    def test_analyze_delimiter(self, capsys):
        """Test --delimiter switches the sequencing strategy."""
        assert main(['analyze', '--samples', 'Le-go-las,El-ro-hir', '--delimiter', '-', '--json']) == 0
        chars = {row['chars'] for row in json.loads(capsys.readouterr().out)}
        assert chars == {'Le', 'go', 'las', 'El', 'ro', 'hir'}

    def test_analyze_table(self, capsys):
        """Test the table output."""
        assert main(['analyze', *BOB_ARGS]) == 0
        assert "distinct sequences" in capsys.readouterr().out


class TestCLIProfiles:
    """Tests for profiles command."""

    def test_profiles_json(self, capsys):
        """Test listing bundled profiles."""
        assert main(['profiles', '--json']) == 0
        ids = [p['id'] for p in json.loads(capsys.readouterr().out)]
        assert 'borderlands' in ids

    def test_profiles_table(self, capsys):
        """Test the table output."""
        assert main(['profiles']) == 0
        assert "borderlands" in capsys.readouterr().out


class TestReadCorpus:
    """Tests for read_corpus."""

    def test_skips_blank_and_comments(self, tmp_path):
        """Test blank lines and comments are ignored."""
        path = tmp_path / 'c.txt'
        path.write_text("# header\n  Bob  \n\nGobob\n", encoding='utf-8')
        assert read_corpus(str(path)) == ['Bob', 'Gobob']
