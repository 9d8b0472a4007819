from gerrit_review_mcp.infrastructure.tools.vcs.gerrit.gerrit_response_parser import (
    strip_xssi_prefix,
)


def test_strips_magic_prefix_line():
    assert strip_xssi_prefix(')]}\'\n{"a": 1}') == '{"a": 1}'


def test_strips_magic_prefix_with_crlf():
    assert strip_xssi_prefix(")]}'\r\n[]") == "[]"


def test_leaves_plain_body_untouched():
    assert strip_xssi_prefix('{"a": 1}') == '{"a": 1}'
