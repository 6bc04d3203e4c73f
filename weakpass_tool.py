#!/usr/bin/env python3
"""Weak password wordlist generator built from personal information."""

import argparse
import json
import logging
import sys
from dataclasses import dataclass, fields as dataclass_fields
from typing import Callable, Dict, Iterable, List, Optional, Set, TextIO, Tuple


logger = logging.getLogger(__name__)

BACK_TOKEN = "&&&"
LOG_FORMAT = "%(asctime)s %(message)s"
LOG_DATEFMT = "%H:%M:%S"

COMMON_SUFFIXES = ("123", "321", "666", "888", "999", "000", "111", "222")
IDIOM_SUFFIXES = ("123", "321", "666", "888")
SPECIAL_CHARS = ("!", "@", "#", "$", "%", "*", ".", "_")
SPECIAL_TAIL = "123"
COMMON_PASSWORDS = (
    "password", "123456", "123456789", "qwerty", "abc123",
    "password123", "admin", "root", "user", "guest",
    "welcome", "login", "pass", "test", "demo",
    "12345678", "1234567890", "qwertyuiop", "asdfghjkl",
    "zxcvbnm", "iloveyou", "princess", "rockyou",
)
KEYBOARD_PATTERNS = (
    "qwerty", "asdfgh", "zxcvbn", "qwertyui", "asdfghjk",
    "zxcvbnm", "1qaz2wsx", "qazwsx", "123qwe", "qwe123",
    "asd123", "zxc123", "147258", "159357", "741852",
)

# Older profiles use the short names.
FIELD_ALIASES = {"name": "first_name", "surname": "last_name", "company": "employer"}


@dataclass(frozen=True)
class FieldSet:
    """Personal information for one subject. Empty string means absent."""

    first_name: str = ""
    last_name: str = ""
    nickname: str = ""
    birth_year: str = ""
    birth_month: str = ""
    birth_day: str = ""
    phone: str = ""
    email: str = ""
    pet_name: str = ""
    favorite_number: str = ""
    employer: str = ""
    school: str = ""


FIELD_NAMES: Tuple[str, ...] = tuple(f.name for f in dataclass_fields(FieldSet))

FIELD_PROMPTS: List[Tuple[str, str]] = [
    ("first_name", "First name (e.g., anna)"),
    ("last_name", "Last name (e.g., smith)"),
    ("nickname", "Nickname / handle (e.g., annie)"),
    ("birth_year", "Birth year (e.g., 1990)"),
    ("birth_month", "Birth month (e.g., 05)"),
    ("birth_day", "Birth day (e.g., 15)"),
    ("phone", "Phone number (e.g., 5551234567)"),
    ("email", "Email address (e.g., anna@example.com)"),
    ("pet_name", "Pet name (e.g., rex)"),
    ("favorite_number", "Favorite number (e.g., 7)"),
    ("employer", "Employer / company (e.g., acme)"),
    ("school", "School (e.g., sample academy)"),
]


def capitalize_first(value: str) -> str:
    if not value:
        return value
    # Tail keeps its case; a multi-character upper mapping keeps its first character.
    return value[0].upper()[0] + value[1:]


def phone_tail(phone: str) -> str:
    return phone[-4:]


class CombinationEngine:
    """Runs the generation passes for one FieldSet into a shared candidate set.

    The passes only ever insert; duplicates collapse on exact string
    equality, so "Anna" and "anna" are distinct candidates.
    """

    def __init__(self, fields: FieldSet) -> None:
        self.fields = fields
        self._candidates: Set[str] = set()
        self._generated = False

    def _add(self, value: str) -> None:
        self._candidates.add(value)

    def generate(self) -> Set[str]:
        if self._generated:
            return set(self._candidates)
        passes: List[Tuple[str, Callable[[], None]]] = [
            ("basic", self._add_basic_combinations),
            ("number", self._add_number_combinations),
            ("common", self._add_common_patterns),
            ("keyboard", self._add_keyboard_patterns),
            ("special", self._add_special_combinations),
        ]
        for label, run in passes:
            before = len(self._candidates)
            run()
            logger.debug("%s pass added %d candidates", label, len(self._candidates) - before)
        self._generated = True
        return set(self._candidates)

    def materialize(self, limit: Optional[int] = None) -> List[str]:
        if limit is not None and limit < 0:
            raise ValueError(f"limit must be non-negative, got {limit}")
        if not self._generated:
            self.generate()
        ordered = sorted(self._candidates)
        if limit is not None:
            return ordered[:limit]
        return ordered

    def _add_basic_combinations(self) -> None:
        info = self.fields
        words = [info.first_name, info.last_name, info.nickname, info.pet_name, info.employer, info.school]

        for word in words:
            if word:
                self._add(word.lower())
                self._add(word)
                self._add(capitalize_first(word))

        for i in range(len(words)):
            for j in range(i + 1, len(words)):
                a, b = words[i], words[j]
                if a and b:
                    self._add(a.lower() + b.lower())
                    self._add(a + b)
                    self._add(capitalize_first(a) + capitalize_first(b))

    def _add_number_combinations(self) -> None:
        info = self.fields
        words = [w for w in (info.first_name, info.last_name, info.nickname, info.pet_name) if w]
        numbers = [
            n
            for n in (info.birth_year, info.birth_month, info.birth_day, info.favorite_number, phone_tail(info.phone))
            if n
        ]

        for word in words:
            lower = word.lower()
            for num in numbers:
                self._add(lower + num)
                self._add(word + num)
                self._add(num + lower)
                self._add(num + word)
            for suffix in COMMON_SUFFIXES:
                self._add(lower + suffix)
                self._add(word + suffix)

        if not (info.birth_year and info.birth_month and info.birth_day):
            return
        composites = [
            info.birth_year + info.birth_month + info.birth_day,
            info.birth_month + info.birth_day,
            info.birth_day + info.birth_month,
            info.birth_year[-2:],
        ]
        for composite in composites:
            self._add(composite)
            for word in words:
                self._add(word.lower() + composite)
                self._add(composite + word.lower())

    def _add_common_patterns(self) -> None:
        for pwd in COMMON_PASSWORDS:
            self._add(pwd)
            self._add(capitalize_first(pwd))
            self._add(pwd.upper())

        info = self.fields
        for word in (info.first_name, info.last_name, info.nickname):
            if not word:
                continue
            lower = word.lower()
            for suffix in IDIOM_SUFFIXES:
                self._add(lower + suffix)
            self._add("i_love_" + lower)
            self._add("my_" + lower)

    def _add_keyboard_patterns(self) -> None:
        for pattern in KEYBOARD_PATTERNS:
            self._add(pattern)
            self._add(pattern.upper())
            self._add(capitalize_first(pattern))

    def _add_special_combinations(self) -> None:
        info = self.fields
        for word in (info.first_name, info.last_name, info.nickname):
            if not word:
                continue
            lower = word.lower()
            for special in SPECIAL_CHARS:
                self._add(lower + special)
                self._add(special + lower)
                self._add(lower + special + SPECIAL_TAIL)


def generate_wordlist(fields: FieldSet, limit: Optional[int] = None) -> List[str]:
    engine = CombinationEngine(fields)
    engine.generate()
    return engine.materialize(limit)


def build_banner_lines() -> List[str]:
    return [
        "__        __         _                         ",
        "\\ \\      / /__  __ _| | ___ __   __ _ ___ ___ ",
        " \\ \\ /\\ / / _ \\/ _` | |/ / '_ \\ / _` / __/ __|",
        "  \\ V  V /  __/ (_| |   <| |_) | (_| \\__ \\__ \\",
        "   \\_/\\_/ \\___|\\__,_|_|\\_\\ .__/ \\__,_|___/___/",
        "                         |_|                   ",
    ]


def print_banner() -> None:
    for line in build_banner_lines():
        print(line)
    print("Educational use only. Test only with explicit permission.\n")


def collect_fields() -> FieldSet:
    answers: Dict[str, str] = {}
    print("\nEnter personal information. Leave blank to skip. Type &&& then ENTER to go back.")
    idx = 0
    total = len(FIELD_PROMPTS)
    while idx < total:
        key, label = FIELD_PROMPTS[idx]
        try:
            raw = input(f"{label}: ").strip()
        except EOFError:
            # Input ran out; the remaining fields stay blank.
            print()
            break
        if raw != BACK_TOKEN:
            answers[key] = raw
            idx += 1
        elif idx > 0:
            idx -= 1
            print("Going back to previous question.")
        else:
            print("Already at the first question.")
    return FieldSet(**answers)


def load_fields_from_json(stdin_data: str) -> FieldSet:
    try:
        loaded = json.loads(stdin_data)
    except json.JSONDecodeError as exc:
        raise ValueError(f"Invalid JSON input: {exc}") from exc
    if not isinstance(loaded, dict):
        raise ValueError("Profile JSON must be an object.")

    values: Dict[str, str] = {}
    for key, value in loaded.items():
        name = FIELD_ALIASES.get(key, key)
        if name != key and name in loaded:
            logger.warning("Profile key %r shadowed by %r", key, name)
            continue
        if name not in FIELD_NAMES:
            logger.warning("Ignoring unknown profile key %r", key)
            continue
        if isinstance(value, (list, dict)):
            raise ValueError(f"Profile field {key!r} must be a single value.")
        values[name] = "" if value is None else str(value).strip()
    return FieldSet(**values)


def read_profile(stream: TextIO) -> FieldSet:
    document = stream.read()
    if not document.strip():
        raise ValueError("no JSON profile supplied on stdin for --quiet mode.")
    return load_fields_from_json(document)


def parse_limit(raw: Optional[str]) -> Optional[int]:
    """Lenient limit parsing: anything that is not a non-negative integer means no limit."""
    if raw is None:
        return None
    try:
        limit = int(raw.strip())
    except ValueError:
        logger.warning("Ignoring malformed limit %r", raw)
        return None
    if limit < 0:
        logger.warning("Ignoring negative limit %d", limit)
        return None
    return limit


def write_wordlist(path: str, candidates: Iterable[str]) -> int:
    written = 0
    try:
        with open(path, "w", encoding="utf-8", newline="") as writer:
            for candidate in candidates:
                writer.write(candidate + "\n")
                written += 1
    except OSError as exc:
        raise RuntimeError(f"Filesystem error: {exc}") from exc
    return written


def print_wordlist(candidates: Iterable[str]) -> None:
    for idx, candidate in enumerate(candidates, start=1):
        print(f"{idx:4}. {candidate}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Generate likely weak passwords from personal information.",
        add_help=True,
    )
    parser.add_argument("-i", "--interactive", action="store_true", help="Enter personal information interactively.")
    parser.add_argument("-o", "--output", metavar="FILE", help="Write the wordlist to FILE instead of the console.")
    parser.add_argument("-l", "--limit", metavar="NUMBER", help="Keep only the first NUMBER candidates after sorting.")
    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Non-interactive mode: skip banner/prompts, read JSON profile from stdin, then generate.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log per-pass statistics.")
    return parser


def main(argv: Optional[List[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        format=LOG_FORMAT,
        datefmt=LOG_DATEFMT,
        level=logging.DEBUG if args.verbose else logging.WARNING,
    )

    if not args.quiet:
        print_banner()

    if args.quiet:
        try:
            info = read_profile(sys.stdin)
        except ValueError as exc:
            print(f"Error: {exc}", file=sys.stderr)
            sys.exit(1)
    elif args.interactive:
        info = collect_fields()
    else:
        print("Use -i or --interactive to enter personal information.")
        parser.print_help()
        sys.exit(0)

    if not args.quiet:
        print("\nGenerating passwords...")
    passwords = generate_wordlist(info, parse_limit(args.limit))

    if not args.quiet:
        print(f"\nGenerated {len(passwords)} likely weak passwords:\n")

    if args.output:
        try:
            write_wordlist(args.output, passwords)
        except RuntimeError as exc:
            print(f"Warning: could not save wordlist: {exc}", file=sys.stderr)
        else:
            if not args.quiet:
                print(f"Passwords saved to: {args.output}")
    elif args.quiet:
        for password in passwords:
            print(password)
    else:
        print_wordlist(passwords)

    if not args.quiet:
        print("\nWarning: these passwords are for authorized security testing only.")
        print("Tip: use strong, unique passwords and enable two-factor authentication.")


if __name__ == "__main__":
    main()
