"""Tests for command-line splitting."""

from __future__ import annotations

import pytest

from evry.commands._args import Command, HelpRequested, UsageError, parse_argv


class TestParseArgv:
    def test_run(self) -> None:
        inv = parse_argv(["2", "weeks", "-scrapesite"])
        assert inv.command == Command.RUN
        assert inv.raw_duration == "2 weeks"
        assert inv.tag == "scrapesite"

    def test_tag_position_does_not_matter(self) -> None:
        expected = parse_argv(["2", "weeks", "-scrapesite"])
        assert parse_argv(["-scrapesite", "2", "weeks"]) == expected

    def test_single_quoted_duration(self) -> None:
        assert parse_argv(["2 weeks, 5 hrs", "-x"]).raw_duration == "2 weeks, 5 hrs"

    def test_multiple_tags_joined(self) -> None:
        assert parse_argv(["1", "day", "-a", "-b"]).tag == "a_b"

    def test_only_first_hyphen_stripped(self) -> None:
        assert parse_argv(["1", "day", "--double"]).tag == "-double"

    def test_location(self) -> None:
        inv = parse_argv(["location", "-scrapesite"])
        assert inv.command == Command.LOCATION
        assert inv.tag == "scrapesite"

    def test_location_empty_tag(self) -> None:
        inv = parse_argv(["location", "-"])
        assert inv.command == Command.LOCATION
        assert inv.tag == ""

    def test_duration_needs_no_tag(self) -> None:
        inv = parse_argv(["duration", "5wk,", "5d"])
        assert inv.command == Command.DURATION
        assert inv.raw_duration == "5wk, 5d"
        assert inv.tag == ""

    def test_rollback(self) -> None:
        inv = parse_argv(["rollback", "-scrapesite"])
        assert inv.command == Command.ROLLBACK
        assert inv.tag == "scrapesite"

    def test_command_name_only_counts_first(self) -> None:
        inv = parse_argv(["2", "location", "-x"])
        assert inv.command == Command.RUN
        assert inv.raw_duration == "2 location"


class TestUsageErrors:
    @pytest.mark.parametrize("args", [["help"], ["--help"], ["2", "days", "-x", "help"]])
    def test_help(self, args: list[str]) -> None:
        with pytest.raises(HelpRequested):
            parse_argv(args)

    @pytest.mark.parametrize(
        "args,message",
        [
            ([], "duration string or a command"),
            (["-tag"], "duration string or a command"),
            (["2", "weeks"], "tag name"),
            (["location"], "tag name"),
            (["rollback"], "tag name"),
            (["2", "weeks", "-"], "tag was an empty string"),
            (["rollback", "-"], "tag was an empty string"),
            (["duration"], "duration was an empty string"),
            (["-x", "   "], "duration was an empty string"),
        ],
    )
    def test_invalid(self, args: list[str], message: str) -> None:
        with pytest.raises(UsageError, match=message):
            parse_argv(args)
