from __future__ import annotations
import argparse, json, sys
from . import config as CFG
from .codec import is_valid_digit_sequence
from .engine import Engine
from .loader import SourceUnavailable
from .models import Suggestions

EXIT_NO_SOURCE = 2
EXIT_BAD_SEQUENCE = 3


def _print_suggestions(res: Suggestions, as_json: bool) -> None:
    if as_json:
        print(json.dumps(res.to_dict(), ensure_ascii=False, indent=2))
        return
    print(f"Exact matches for {res.sequence}: ")
    if res.exact:
        for word in res.words():
            print(word)
    else:
        print(CFG.NO_MATCHES)
    print(f"Prefix matches for {res.sequence}: ")
    if res.completions:
        for w in sorted(res.completions):
            print(w)
    else:
        print(CFG.NO_MATCHES)


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(prog="t9-suggest", description="Predictive text (T9) suggestions from a corpus")
    p.add_argument("corpus", nargs="+", help="Corpus file(s) or folder(s) of .txt files")
    p.add_argument("-s", "--seq", default=None, help="Digit sequence (2-9) to look up")
    p.add_argument("--repl", action="store_true", help="Interactive loop after building")
    p.add_argument("--json", action="store_true", help="Emit JSON instead of plain lists")
    p.add_argument("--verbose", action="store_true")
    args = p.parse_args(argv)

    if args.seq is None and not args.repl:
        p.error("nothing to do: pass --seq and/or --repl")

    # reject a bad sequence before spending time on the corpus
    if args.seq is not None and not is_valid_digit_sequence(args.seq):
        print(f"Invalid input sequence: {args.seq}")
        return EXIT_BAD_SEQUENCE

    eng = Engine()
    try:
        try:
            eng.build(args.corpus, verbose=args.verbose)
        except SourceUnavailable as e:
            print(e)
            return EXIT_NO_SOURCE

        if args.seq is not None:
            _print_suggestions(eng.suggest(args.seq), args.json)

        if args.repl:
            print("Type a digit sequence (empty line to exit).")
            while True:
                try:
                    q = input("> ").strip()
                except (EOFError, KeyboardInterrupt):
                    print(); break
                if not q:
                    break
                if not is_valid_digit_sequence(q):
                    print(f"Invalid input sequence: {q}")
                    continue
                _print_suggestions(eng.suggest(q), args.json)

        return 0
    finally:
        eng.shutdown()


if __name__ == "__main__":
    sys.exit(main())
