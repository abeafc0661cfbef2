"""End-to-end tests for the command-line entry point."""

import pytest

from beruang.cli import main


@pytest.fixture
def workbook(write_workbook, sample_sheets):
    return write_workbook(sample_sheets)


def test_no_command_prints_help(capsys):
    assert main([]) == 0
    assert "combine" in capsys.readouterr().out


def test_combine_then_summary(workbook, tmp_path, capsys):
    snapshot = tmp_path / "ledger.parquet"
    assert main(["combine", str(workbook), "--output", str(snapshot)]) == 0
    assert snapshot.exists()
    out = capsys.readouterr().out
    assert "Saved 5 rows" in out
    assert "Accounts: A, B" in out

    assert main(["summary", str(snapshot)]) == 0
    out = capsys.readouterr().out
    assert "Sum" in out and "Mean" in out
    assert "102.70" in out        # A/MYR: 10 + 5 + 100 - 12.30
    assert "1234.56" in out


def test_combine_default_output_path(workbook):
    assert main(["combine", str(workbook), "--format", "csv"]) == 0
    assert workbook.with_suffix(".csv").exists()


def test_net_from_csv_snapshot(workbook, tmp_path, capsys):
    snapshot = tmp_path / "ledger.csv"
    assert main(["combine", str(workbook), "--sheets", "Jan", "Feb", "--format", "csv",
                 "--output", str(snapshot)]) == 0
    capsys.readouterr()

    assert main(["net", str(snapshot), "--group", "monthly"]) == 0
    out = capsys.readouterr().out
    assert "15.00" in out          # January, A/MYR
    assert "-12.30" in out         # February, transfer left out
    assert "87.70" not in out


def test_net_ignore_override(workbook, tmp_path, capsys):
    snapshot = tmp_path / "ledger.parquet"
    main(["combine", str(workbook), "--output", str(snapshot)])
    capsys.readouterr()
    assert main(["net", str(snapshot), "--ignore", "Makan"]) == 0
    out = capsys.readouterr().out
    assert "87.70" in out
    assert "15.00" not in out


def test_missing_sheet_exits_nonzero(workbook, capsys):
    assert main(["combine", str(workbook), "--sheets", "Mac"]) == 1
    assert "Mac" in capsys.readouterr().err


@pytest.mark.parametrize("command", ["summary", "net"])
def test_malformed_snapshot_exits_nonzero(tmp_path, capsys, command):
    snapshot = tmp_path / "ledger.csv"
    snapshot.write_text("Tarikh,Keterangan,Kategori,Akaun,Wang,Jumlah\n"
                        "2024-01-05,Nasi lemak,Makan,A,MYR,1.234\n")
    assert main([command, str(snapshot)]) == 1
    err = capsys.readouterr().err
    assert err.startswith("Error:")
    assert "ledger.csv" in err


def test_missing_workbook_exits_nonzero(tmp_path, capsys):
    assert main(["combine", str(tmp_path / "missing.xlsx")]) == 1
    assert "Error:" in capsys.readouterr().err


def test_add(tmp_path, capsys):
    path = tmp_path / "t.csv"
    assert main(["add", "-500", "Makan", "Kedai Ali", "--details", "Refund",
                 "--date", "2024-01-05", "--file", str(path)]) == 0
    assert path.read_text().splitlines()[1] == "2024-01-05,Refund,MAYB,Makan,Kedai Ali,MYR,-5.00"
