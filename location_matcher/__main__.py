"""CLI entrypoint for location_matcher."""

from __future__ import annotations

import argparse
import json
import sys

from location_matcher.logging_config import setup_logging


def main(argv: list[str] | None = None) -> int:
    setup_logging()

    parser = argparse.ArgumentParser(prog="location-matcher")
    parser.add_argument("--dictionary", help="JSON file of canonical name -> variant spellings")
    sub = parser.add_subparsers(dest="command", required=True)

    norm_parser = sub.add_parser("normalize")
    norm_parser.add_argument("value")
    norm_parser.add_argument("--explain", action="store_true", help="print the full resolution as JSON")

    match_parser = sub.add_parser("match")
    match_parser.add_argument("a")
    match_parser.add_argument("b")

    sim_parser = sub.add_parser("similarity", help="edit-distance score of the two strings as typed")
    sim_parser.add_argument("a")
    sim_parser.add_argument("b")

    var_parser = sub.add_parser("variations")
    var_parser.add_argument("value")

    best_parser = sub.add_parser("best")
    best_parser.add_argument("target")
    best_parser.add_argument("candidates", nargs="+")

    args = parser.parse_args(argv)
    matcher = _build_matcher(parser, args.dictionary)

    if args.command == "normalize":
        return _normalize(matcher, args.value, args.explain)
    if args.command == "match":
        ok = matcher.locations_match(args.a, args.b)
        print("true" if ok else "false")
        return 0 if ok else 1
    if args.command == "similarity":
        return _similarity(args.a, args.b)
    if args.command == "variations":
        for v in matcher.get_location_variations(args.value):
            print(v)
        return 0
    if args.command == "best":
        found = matcher.find_best_match(args.target, args.candidates)
        if found is None:
            print("(no match)")
            return 1
        print(found)
        return 0
    return 2


def _build_matcher(parser: argparse.ArgumentParser, dictionary_path: str | None):
    from location_matcher.gazetteer import CanonicalDictionary, DictionaryError, init_default_dictionary
    from location_matcher.matcher import LocationMatcher

    try:
        if dictionary_path:
            return LocationMatcher(CanonicalDictionary.from_json(dictionary_path))
        return LocationMatcher(init_default_dictionary())
    except DictionaryError as exc:
        parser.error(str(exc))


def _normalize(matcher, value: str, explain: bool) -> int:
    resolution = matcher.normalizer.resolve(value)
    if explain:
        print(json.dumps(resolution.model_dump(mode="json"), ensure_ascii=False, indent=2))
    else:
        print(resolution.canonical)
    return 0


def _similarity(a: str, b: str) -> int:
    from location_matcher.similarity import levenshtein_distance, similarity

    print(f"Similarity: {similarity(a, b):.1f}")
    print(f"Distance:   {levenshtein_distance(a, b)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
