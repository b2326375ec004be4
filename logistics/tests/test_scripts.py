"""
Tests for the command-line scripts.

Run with: pytest logistics/tests/test_scripts.py -v
"""

import pytest
import polars as pl
from decimal import Decimal

from logistics.scripts import calculate_file, calculator


# =============================================================================
# CALCULATOR
# =============================================================================

class TestCalculator:
    """Tests for the single-delivery calculator."""

    def test_flags_only(self, capsys):
        calculator.main([
            "--recipient", "Fulano",
            "--address", "Rua A, 123",
            "--weight", "5",
            "--code", "exp",
        ])
        out = capsys.readouterr().out
        assert "Valor do Frete: R$ 17,50" in out
        assert "Pedido para Fulano com frete tipo EXP no valor de R$ 17,50" in out
        assert "Free shipping: no" in out

    def test_prompts_for_missing(self, capsys, monkeypatch):
        answers = iter(["Ciclano", "Rua B, 456", "1.5", "ECO"])
        monkeypatch.setattr("builtins.input", lambda prompt="": next(answers))

        calculator.main([])

        out = capsys.readouterr().out
        assert "Destinatário: Ciclano" in out
        assert "Free shipping: yes" in out

    def test_invalid_weight_exits(self, capsys):
        with pytest.raises(SystemExit) as exc:
            calculator.main([
                "--recipient", "Fulano",
                "--address", "Rua A, 123",
                "--weight", "0",
                "--code", "PAD",
            ])
        assert exc.value.code == 2
        assert "Weight must be greater than zero" in capsys.readouterr().out

    def test_unknown_code_exits(self, capsys):
        with pytest.raises(SystemExit) as exc:
            calculator.main([
                "--recipient", "Fulano",
                "--address", "Rua A, 123",
                "--weight", "5",
                "--code", "XYZ",
            ])
        assert exc.value.code == 2
        assert "Unsupported freight type: XYZ" in capsys.readouterr().out

    def test_help_lists_codes(self, capsys):
        with pytest.raises(SystemExit) as exc:
            calculator.main(["--help"])
        assert exc.value.code == 0
        assert "PAD, EXP, ECO" in capsys.readouterr().out


# =============================================================================
# CSV BATCH
# =============================================================================

class TestCalculateFile:
    """Tests for the CSV batch script."""

    @pytest.fixture
    def input_csv(self, tmp_path):
        path = tmp_path / "deliveries.csv"
        pl.DataFrame({
            "recipient": ["Fulano", "Beltrano", "Ciclano"],
            "address": ["Rua A, 123", "Rua C, 789", "Rua B, 456"],
            "weight_kg": ["10", "5", "1.1"],
            "freight_code": ["PAD", "EXP", "ECO"],
        }).write_csv(path)
        return path

    def test_run(self, input_csv, tmp_path):
        output = tmp_path / "priced.csv"
        df = calculate_file.run(input_csv, output)

        assert output.exists()
        assert df["cost_freight"].to_list() == [
            Decimal("12.00"), Decimal("17.50"), Decimal("0.00")
        ]
        assert len(pl.read_csv(output)) == 3

    def test_summary(self, input_csv, tmp_path):
        df = calculate_file.run(input_csv, tmp_path / "priced.csv")
        summary = calculate_file.summarize(df)
        assert summary["freight_code"].to_list() == ["ECO", "EXP", "PAD"]
        assert summary["deliveries"].to_list() == [1, 1, 1]
        assert summary["free"].to_list() == [1, 0, 0]

    def test_main(self, input_csv, tmp_path, capsys):
        calculate_file.main([str(input_csv), str(tmp_path / "priced.csv")])
        out = capsys.readouterr().out
        assert "Loaded 3 deliveries" in out
        assert "SUMMARY BY FREIGHT CODE" in out

    def test_bad_row_exits(self, tmp_path, capsys):
        path = tmp_path / "bad.csv"
        pl.DataFrame({
            "recipient": ["Fulano"],
            "address": ["Rua A, 123"],
            "weight_kg": ["-1"],
            "freight_code": ["PAD"],
        }).write_csv(path)

        with pytest.raises(SystemExit) as exc:
            calculate_file.main([str(path), str(tmp_path / "out.csv")])
        assert exc.value.code == 2
        assert "Row 0" in capsys.readouterr().out

    def test_missing_column_exits(self, tmp_path, capsys):
        path = tmp_path / "no_weight.csv"
        pl.DataFrame({
            "recipient": ["Fulano"],
            "address": ["Rua A, 123"],
            "freight_code": ["PAD"],
        }).write_csv(path)

        with pytest.raises(SystemExit) as exc:
            calculate_file.main([str(path), str(tmp_path / "out.csv")])
        assert exc.value.code == 2
        assert "Error: Missing required columns: weight_kg" in capsys.readouterr().out

    def test_missing_file_exits(self, tmp_path, capsys):
        with pytest.raises(SystemExit) as exc:
            calculate_file.main([str(tmp_path / "absent.csv"), str(tmp_path / "out.csv")])
        assert exc.value.code == 2
        assert "Error:" in capsys.readouterr().out
        assert not (tmp_path / "out.csv").exists()
