"""
Tests for the interactive calculator script.
"""

import sys
from pathlib import Path

# Add project root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent.parent))

import pytest

from parcel_estimator.models import Category, City, CostBreakdown
from parcel_estimator.scripts import calculator


def feed(monkeypatch, answers):
    """Answer input() prompts in order."""
    answers = iter(answers)
    monkeypatch.setattr("builtins.input", lambda prompt="": next(answers))


# =============================================================================
# FORMATTING
# =============================================================================

class TestFormatting:
    """Tests for result formatting."""

    @pytest.mark.parametrize("amount, expected", [
        (0, "Rp 0"),
        (860, "Rp 860"),
        (28860, "Rp 28.860"),
        (1234567, "Rp 1.234.567"),
    ])
    def test_format_rupiah(self, amount, expected):
        assert calculator.format_rupiah(amount) == expected

    def test_breakdown_hides_zero_lines(self):
        breakdown = CostBreakdown(2.0, 15000, 6000, 0, 21000, 2310, 0, 23310)
        text = "\n".join(calculator.format_breakdown(breakdown))
        assert "Additional Cost" not in text
        assert "Insurance" not in text
        assert "Rp 23.310" in text
        assert "2.00 kg" in text

    def test_breakdown_shows_insurance(self):
        breakdown = CostBreakdown(10.0, 25000, 30000, 10000, 65000, 7150, 1300, 73450)
        text = "\n".join(calculator.format_breakdown(breakdown))
        assert "Insurance:" in text
        assert "Additional Cost:" in text
        assert "Rp 73.450" in text


# =============================================================================
# PROMPTS
# =============================================================================

class TestPrompts:
    """Tests for interactive prompts."""

    def test_choose_default(self, monkeypatch):
        feed(monkeypatch, [""])
        assert calculator.choose("From", list(City), City.JAKARTA) is City.JAKARTA

    def test_choose_by_number(self, monkeypatch):
        feed(monkeypatch, ["4"])
        assert calculator.choose("To", list(City), City.BANDUNG) is City.MEDAN

    def test_choose_by_name_after_bad_answer(self, monkeypatch):
        feed(monkeypatch, ["99", "wild animals"])
        result = calculator.choose("Type", list(Category), Category.DOCUMENTS)
        assert result is Category.WILD_ANIMALS

    def test_get_user_input_reprompts_on_error(self, monkeypatch, capsys):
        """Invalid weight prints the message and asks again."""
        feed(monkeypatch, [
            "0", "30", "20", "10", "", "", "", "n",
            "5", "50", "40", "30", "1", "4", "3", "y",
        ])
        package = calculator.get_user_input()
        assert "Please enter a valid package weight" in capsys.readouterr().out
        assert package.weight_kg == 5.0
        assert package.destination is City.MEDAN
        assert package.category is Category.ELECTRONICS
        assert package.insured is True

    def test_main_prints_total(self, monkeypatch, capsys):
        feed(monkeypatch, ["2", "30", "20", "10", "", "", "", "", "n"])
        calculator.main()
        assert "Rp 28.860" in capsys.readouterr().out

    def test_main_cancel(self, monkeypatch, capsys):
        def interrupt(prompt=""):
            raise KeyboardInterrupt
        monkeypatch.setattr("builtins.input", interrupt)
        calculator.main()
        assert "Cancelled." in capsys.readouterr().out


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
