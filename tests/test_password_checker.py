"""Tests for the password checker facade."""

from password_checker import analyze_password, check_password_strength


class TestCheckPasswordStrength:
    """Label and suggestion list."""

    def test_strong_password(self):
        """A password meeting every criterion has no suggestions."""
        strength, feedback = check_password_strength("Abcdefg1!")
        assert strength == "Very Strong"
        assert feedback == []

    def test_empty_password(self):
        """Empty password is Very Weak with all five suggestions."""
        strength, feedback = check_password_strength("")
        assert strength == "Very Weak"
        assert len(feedback) == 5

    def test_feedback_keeps_order(self):
        """Suggestions follow criterion order."""
        _, feedback = check_password_strength("abc")
        assert feedback[0].startswith("Length")
        assert feedback[-1].startswith("Special Characters")

    def test_extended_common_pattern(self):
        """Extended feedback includes the common-pattern warning."""
        strength, feedback = check_password_strength("myqwertypass", "extended")
        assert any("common" in f.lower() for f in feedback)
        assert strength == "Very Weak"


class TestAnalyzePassword:
    """JSON-ready report."""

    def test_report_fields(self):
        """Report carries score, display fields and criteria."""
        result = analyze_password("Abcdefg1!")
        assert result["score"] == 5
        assert result["max_score"] == 5
        assert result["variant"] == "standard"
        assert result["label"] == "Very Strong"
        assert result["color"] == "green"
        assert result["percent"] == 100
        assert [c["id"] for c in result["criteria"]] == [
            "length_min", "uppercase", "lowercase", "digit", "special",
        ]

    def test_extended_report(self):
        """Extended report uses the extended tables."""
        result = analyze_password("AAAAAAAAAAAA", "extended")
        assert result["score"] == 2
        assert result["label"] == "Weak"
        assert result["color"] == "orange"
        assert result["percent"] == 50
        assert len(result["criteria"]) == 7
