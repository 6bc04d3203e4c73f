import io

import pytest

from weakpass_tool import (
    FieldSet,
    collect_fields,
    generate_wordlist,
    load_fields_from_json,
    main,
    parse_limit,
    print_wordlist,
    write_wordlist,
)


def feed_input(monkeypatch, answers):
    answers = iter(answers)
    monkeypatch.setattr("builtins.input", lambda prompt="": next(answers))


def test_load_fields_from_json_accepts_aliases():
    info = load_fields_from_json('{"name": "Anna", "surname": " Smith ", "company": "Acme", "birth_year": 1990}')
    assert info == FieldSet(first_name="Anna", last_name="Smith", employer="Acme", birth_year="1990")


def test_load_fields_from_json_null_and_unknown_keys():
    info = load_fields_from_json('{"first_name": null, "shoe_size": "42", "pet_name": "rex"}')
    assert info == FieldSet(pet_name="rex")


@pytest.mark.parametrize("document", ["{not json", "[1, 2]", '{"first_name": ["a", "b"]}'])
def test_load_fields_from_json_rejects_bad_documents(document):
    with pytest.raises(ValueError):
        load_fields_from_json(document)


@pytest.mark.parametrize(
    "raw, expected",
    [(None, None), ("10", 10), (" 4 ", 4), ("0", 0), ("abc", None), ("-3", None), ("", None)],
)
def test_parse_limit(raw, expected):
    assert parse_limit(raw) == expected


def test_write_wordlist(tmp_path):
    target = tmp_path / "words.txt"
    assert write_wordlist(str(target), ["Anna", "anna"]) == 2
    assert target.read_text(encoding="utf-8") == "Anna\nanna\n"


def test_write_wordlist_wraps_filesystem_errors(tmp_path):
    with pytest.raises(RuntimeError, match="Filesystem error"):
        write_wordlist(str(tmp_path), ["anna"])


def test_print_wordlist(capsys):
    print_wordlist(["anna", "rex"])
    assert capsys.readouterr().out == "   1. anna\n   2. rex\n"


def test_collect_fields_with_backtrack(monkeypatch, capsys):
    feed_input(monkeypatch, ["&&&", "Anna", "&&&", "Ann", "Smith"] + [""] * 10)
    info = collect_fields()
    assert info == FieldSet(first_name="Ann", last_name="Smith")
    out = capsys.readouterr().out
    assert "Already at the first question." in out
    assert "Going back to previous question." in out


def test_main_without_mode_prints_help(capsys):
    with pytest.raises(SystemExit) as exc:
        main([])
    assert exc.value.code == 0
    assert "--interactive" in capsys.readouterr().out


def test_main_quiet_prints_bare_candidates(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO('{"name": "Anna"}'))
    main(["--quiet", "-l", "3"])
    out = capsys.readouterr().out
    assert out.splitlines() == generate_wordlist(FieldSet(first_name="Anna"), 3)


def test_main_quiet_ignores_malformed_limit(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO('{"name": "Anna"}'))
    main(["--quiet", "--limit", "lots"])
    assert capsys.readouterr().out.splitlines() == generate_wordlist(FieldSet(first_name="Anna"))


def test_main_quiet_requires_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("   "))
    with pytest.raises(SystemExit) as exc:
        main(["--quiet"])
    assert exc.value.code == 1
    assert "Error:" in capsys.readouterr().err


def test_main_quiet_rejects_bad_json(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("[]"))
    with pytest.raises(SystemExit) as exc:
        main(["--quiet"])
    assert exc.value.code == 1
    assert "must be an object" in capsys.readouterr().err


def test_main_writes_output_file(monkeypatch, tmp_path):
    target = tmp_path / "out.txt"
    monkeypatch.setattr("sys.stdin", io.StringIO('{"first_name": "Anna"}'))
    main(["--quiet", "-o", str(target)])
    lines = target.read_text(encoding="utf-8").splitlines()
    assert lines == generate_wordlist(FieldSet(first_name="Anna"))


def test_main_write_failure_is_a_warning(monkeypatch, tmp_path, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO('{"first_name": "Anna"}'))
    main(["--quiet", "-o", str(tmp_path)])
    assert "Warning: could not save wordlist" in capsys.readouterr().err


def test_main_interactive_lists_candidates(monkeypatch, capsys):
    feed_input(monkeypatch, ["Anna"] + [""] * 11)
    main(["-i", "-l", "2"])
    out = capsys.readouterr().out
    first, second = generate_wordlist(FieldSet(first_name="Anna"), 2)
    assert f"   1. {first}\n" in out
    assert f"   2. {second}\n" in out
    assert "Generated 2 likely weak passwords" in out
    assert "authorized security testing only" in out


@pytest.mark.parametrize(
    "document",
    ['{"name": "A", "first_name": "B"}', '{"first_name": "B", "name": "A"}'],
)
def test_load_fields_from_json_prefers_canonical_key(document, caplog):
    assert load_fields_from_json(document) == FieldSet(first_name="B")
    assert "shadowed by 'first_name'" in caplog.text


def test_collect_fields_stops_at_end_of_input(monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("Anna\nSmith\n"))
    assert collect_fields() == FieldSet(first_name="Anna", last_name="Smith")


def test_main_interactive_with_short_input(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("Anna\n"))
    main(["-i", "-l", "3"])
    out = capsys.readouterr().out
    expected = generate_wordlist(FieldSet(first_name="Anna"), 3)
    assert "Generated 3 likely weak passwords" in out
    for idx, candidate in enumerate(expected, start=1):
        assert f"{idx:4}. {candidate}\n" in out
