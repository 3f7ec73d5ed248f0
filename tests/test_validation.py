"""Tests for the enum validation rule."""

import pytest

from powerenum import EnumRule, ValidationError
from tests.enums import SocialLink, Status, Type


class TestRule:
    """Test PowerEnum.rule()."""

    def test_returns_validation_rule(self):
        rule = Status.rule()

        assert isinstance(rule, EnumRule)
        assert rule.enum_type is Status

    def test_accepts_backing_values(self):
        assert Status.rule().validate("draft") is Status.Draft
        assert Type.rule().validate(2) is Type.User

    def test_accepts_members(self):
        assert Status.rule().validate(Status.Hidden) is Status.Hidden

    def test_rejects_unknown_values(self):
        """Test invalid values raise ValidationError with details."""
        with pytest.raises(ValidationError, match="invalid for Status") as exc_info:
            Status.rule().validate("archived")

        assert exc_info.value.details == {"enum": "tests.enums.Status", "value": "archived"}

    def test_rejects_names(self):
        """Test names are not backing values."""
        assert not Status.rule().passes("Draft")

    def test_passes(self):
        rule = Type.rule()

        assert rule.passes(3)
        assert not rule.passes(4)


class TestRuleRestrictions:
    """Test only/except_ on rules."""

    def test_only_restricts_rule(self):
        rule = SocialLink.rule().only(SocialLink.Blog, SocialLink.Website)

        assert rule.passes("blog")
        assert rule.passes("website")
        assert not rule.passes("contact")

    def test_except_excludes_cases(self):
        rule = SocialLink.rule().except_([SocialLink.Blog])

        assert not rule.passes("blog")
        assert rule.passes("contact")

    def test_not_allowed_message(self):
        with pytest.raises(ValidationError, match="not allowed for Status"):
            Status.rule().except_(Status.Draft).validate("draft")

    def test_only_and_except_both_apply(self):
        """Test a rule with both restrictions requires both to hold."""
        rule = Type.rule().only(Type.Admin, Type.User).except_(Type.User)

        assert rule.passes(1)
        assert not rule.passes(2)
        assert not rule.passes(3)

    def test_rules_are_immutable(self):
        """Test restricting a rule leaves the original untouched."""
        rule = Status.rule()
        restricted = rule.only(Status.Draft)

        assert restricted is not rule
        assert rule.passes("published")
        assert not restricted.passes("published")

    @pytest.mark.parametrize(
        "selection",
        [
            [Status.Draft],
            [Status.Published, Status.Hidden],
            [Status.Draft, "draft"],
        ],
    )
    def test_restrictions_agree_with_only_and_except(self, selection):
        """Test rule restrictions select the same members as only()/except_()."""
        only_rule = Status.rule().only(selection)
        except_rule = Status.rule().except_(selection)

        for member in Status:
            assert only_rule.passes(member.value) == (member in Status.only(selection))
            assert except_rule.passes(member.value) == (member in Status.except_(selection))


class TestRuleAdapter:
    """Test the pydantic adapter behind rules."""

    def test_adapter_is_shared_per_enum(self):
        """Test rules for the same enum reuse one adapter."""
        rule = Status.rule()

        assert rule._adapter is Status.rule()._adapter
        assert rule.only(Status.Draft)._adapter is rule._adapter
        assert rule.except_(Status.Draft)._adapter is rule._adapter

    def test_adapter_differs_between_enums(self):
        assert Status.rule()._adapter is not SocialLink.rule()._adapter
