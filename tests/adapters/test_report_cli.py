"""Tests for the report_cli adapter."""

from datetime import date
from unittest.mock import MagicMock, call

import pytest

from profitlens.adapters import report_cli
from profitlens.domain.models import Category, Expense, Income, Tag, YearMonth
from profitlens.infrastructure.settings import AppSettings

SOFTWARE = Category(id="cat-software", name="Software", icon="laptop")
CLIENT = Tag(id="tag-client", name="Client X")


@pytest.fixture
def cli(monkeypatch):
    """Wire the CLI to an in-memory repository and mock loggers."""
    repository = MagicMock()
    repository.fetch_expenses.return_value = [
        Expense(
            amount="80",
            date=date(2025, 3, 4),
            category_id=SOFTWARE.id,
            tag_ids={CLIENT.id},
        )
    ]
    repository.fetch_incomes.return_value = [
        Income(amount="1000", date=date(2025, 3, 15), source="Acme")
    ]
    repository.fetch_categories.return_value = [SOFTWARE]
    repository.fetch_tags.return_value = [CLIENT]
    app_logger = MagicMock()
    usage_logger = MagicMock()
    built = []

    def fake_build(settings=None):
        built.append(settings)
        return repository

    monkeypatch.setattr(report_cli, "build_transactions_repository", fake_build)
    monkeypatch.setattr(
        report_cli.AppSettings,
        "from_env",
        classmethod(lambda cls: AppSettings()),
    )
    monkeypatch.setattr(report_cli, "get_app_logger", lambda: app_logger)
    monkeypatch.setattr(report_cli, "get_usage_logger", lambda: usage_logger)
    for name in (
        "REPORT_KIND",
        "REPORT_MONTH",
        "REPORT_YEAR",
        "REPORT_TAG_ID",
        "REPORT_START_DATE",
        "REPORT_END_DATE",
        "REPORT_FORMAT",
    ):
        monkeypatch.delenv(name, raising=False)
    return repository, app_logger, usage_logger, built


def test_month_report_prints_snapshot(cli, monkeypatch, capsys):
    """The default report should print the month's totals and change."""
    _, _, usage_logger, built = cli
    monkeypatch.setenv("REPORT_MONTH", "2025-03")

    report_cli.main()

    output = capsys.readouterr().out
    assert "March 2025" in output
    assert "Income:   $1,000.00" in output
    assert "Profit:   $920.00 (margin 92.0%)" in output
    assert "Change vs previous month: +100.0%" in output
    assert "  Software: $80.00" in output
    assert built == [AppSettings()]
    usage_logger.info.assert_called_once_with("report kind=month format=text")


def test_month_report_as_csv(cli, monkeypatch, capsys):
    """REPORT_FORMAT=csv should print the monthly CSV export."""
    monkeypatch.setenv("REPORT_MONTH", "2025-03")
    monkeypatch.setenv("REPORT_FORMAT", "csv")

    report_cli.main()

    output = capsys.readouterr().out
    assert output.startswith("ProfitLens Monthly Report\n")
    assert "Net Profit,920\n" in output


def test_month_csv_reuses_the_snapshot_rows(cli, monkeypatch, capsys):
    """The CSV export should not query the month a second time."""
    repository = cli[0]
    monkeypatch.setenv("REPORT_MONTH", "2025-03")
    monkeypatch.setenv("REPORT_FORMAT", "csv")

    report_cli.main()

    assert "2025-03-04,Software,80," in capsys.readouterr().out
    assert repository.fetch_expenses.call_args_list == [
        call(date(2025, 3, 1), date(2025, 3, 31)),
        call(date(2025, 2, 1), date(2025, 2, 28)),
    ]
    assert repository.fetch_incomes.call_count == 2
    repository.fetch_categories.assert_called_once_with()


def test_annual_report(cli, monkeypatch, capsys):
    """The annual report should list all twelve months."""
    monkeypatch.setenv("REPORT_KIND", "annual")
    monkeypatch.setenv("REPORT_YEAR", "2025")

    report_cli.main()

    output = capsys.readouterr().out
    assert "Tax year 2025" in output
    assert "January 2025" in output
    assert "December 2025" in output


def test_tag_report(cli, monkeypatch, capsys):
    """The tag report should only count tagged transactions."""
    repository = cli[0]
    monkeypatch.setenv("REPORT_KIND", "tag")
    monkeypatch.setenv("REPORT_TAG_ID", CLIENT.id)
    monkeypatch.setenv("REPORT_START_DATE", "2025-03-01")
    monkeypatch.setenv("REPORT_END_DATE", "2025-03-31")

    report_cli.main()

    output = capsys.readouterr().out
    assert "Tag Client X (2025-03-01 to 2025-03-31)" in output
    assert "Expenses: $80.00" in output
    assert "Transactions: 1" in output
    repository.fetch_expenses.assert_called_once_with(
        date(2025, 3, 1), date(2025, 3, 31)
    )


def test_tag_report_requires_a_tag(cli, monkeypatch, capsys):
    """Without REPORT_TAG_ID the CLI should warn and print nothing."""
    _, app_logger, _, _ = cli
    monkeypatch.setenv("REPORT_KIND", "tag")

    report_cli.main()

    assert capsys.readouterr().out == ""
    app_logger.warning.assert_called_once()


def test_unknown_kind_is_rejected(cli, monkeypatch, capsys):
    """Unknown report kinds should warn before touching the database."""
    _, app_logger, _, built = cli
    monkeypatch.setenv("REPORT_KIND", "weekly")

    report_cli.main()

    assert built == []
    assert "weekly" in app_logger.warning.call_args.args[0]


def test_invalid_inputs_fall_back_with_warnings(monkeypatch):
    """Bad month, year or date values should warn and use defaults."""
    logger = MagicMock()
    monkeypatch.setattr(
        report_cli, "current_month", lambda: YearMonth(2025, 6)
    )

    assert report_cli._parse_month("2025-13", logger) == YearMonth(2025, 6)
    assert report_cli._parse_month("2025-02", logger) == YearMonth(2025, 2)
    assert report_cli._parse_year("twenty", logger) == date.today().year
    assert report_cli._parse_date("03/01/2025", logger) is None
    assert report_cli._parse_date("2025-03-01", logger) == date(2025, 3, 1)
    assert logger.warning.call_count == 3
