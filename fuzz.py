#!/usr/bin/env python3
"""
Random fuzzer for the BBCode renderer.
Generates malformed bracket markup to check that rendering never crashes or hangs
and that output never keeps an unescaped '<' from the input.
"""

import argparse
import random
import re
import string
import sys
import time
import traceback

# Fuzzing strategies
TAGS = [
    "b", "i", "s", "u", "code", "email", "url", "img", "list", "*", "li", "quote",
    "youtube", "font", "size", "color", "left", "center", "right", "spoiler",
]

# Tags whose closing logic rewrites or inspects earlier output
REWRITE_TAGS = ["url", "email", "list"]

BRACKET_SPAN = re.compile(r"\[.*?\]", re.DOTALL)

UNKNOWN_TAGS = ["foo", "table", "h1", "spoilers", "B", "URL", "Li"]

PROPERTIES = [
    "", "1", "a", "A", "Arial", "120", "red", "#ff0000", "http://example.com",
    "foo@bar.com", "Alice", "\"quoted ] bracket\"", "\"unterminated", "a=b", "[nested]",
    "<script>", "'single'",
]

SPECIAL_CHARS = [
    "[", "]", "/", "=", "\"", "<", ">", "\n", "\r", "\r\n", "\t",
    "\x00", " ", "\u200b", "\ufeff", "ü", "✓", "😀",
]


def random_string(min_len=0, max_len=20):
    """Generate random ASCII string."""
    length = random.randint(min_len, max_len)
    return "".join(random.choices(string.ascii_letters + string.digits + " ", k=length))


def fuzz_tag_name():
    """Generate valid, unknown and malformed tag names."""
    choice = random.random()
    if choice < 0.6:
        return random.choice(TAGS)
    if choice < 0.75:
        return random.choice(UNKNOWN_TAGS)
    if choice < 0.85:
        return random.choice(TAGS) + random.choice(SPECIAL_CHARS)
    return random_string(0, 6)


def fuzz_open_tag():
    name = fuzz_tag_name()
    prop = random.choice(PROPERTIES)
    if prop and random.random() < 0.7:
        return f"[{name}={prop}]"
    return f"[{name}]"


def fuzz_close_tag():
    name = fuzz_tag_name()
    slashes = "/" * random.choice([1, 1, 1, 2])
    return f"[{slashes}{name}]"


def fuzz_text():
    parts = [random_string(0, 15)]
    for _ in range(random.randint(0, 3)):
        parts.append(random.choice(SPECIAL_CHARS))
        parts.append(random_string(0, 10))
    return "".join(parts)


def fuzz_paired(depth=0, max_depth=6):
    """Generate properly paired tags with random content."""
    name = random.choice(TAGS)
    inner = fuzz_text()
    if depth < max_depth and random.random() < 0.4:
        inner += fuzz_paired(depth + 1, max_depth)
    return f"[{name}]{inner}[/{name}]"


def fuzz_list():
    kind = random.choice(["", "=1", "=a", "=A"])
    items = "".join(f"[*]{random_string(0, 8)}" for _ in range(random.randint(0, 5)))
    if random.random() < 0.3:
        items += fuzz_list()
    closing = "[/list]" if random.random() < 0.8 else ""
    return f"[list{kind}]{items}{closing}"


def fuzz_rewrite():
    """Auto-link and mailto tags around nested markup."""
    name = random.choice(REWRITE_TAGS)
    inner = random.choice(["http://example.com", "foo@bar.com", ""])
    if random.random() < 0.5:
        inner = f"[b]{inner}[/b]"
    closing = f"[/{name}]" if random.random() < 0.7 else ""
    return f"[{name}]{inner}{closing}"


def fuzz_unterminated():
    return "[" + random_string(0, 10) + random.choice(["", "=", "=\"x", "/"])


def generate_fuzzed_bbcode():
    """Generate a complete fuzzed document."""
    parts = []
    num_elements = random.randint(1, 20)
    for _ in range(num_elements):
        element_type = random.choices(
            [
                fuzz_open_tag,
                fuzz_close_tag,
                fuzz_text,
                fuzz_paired,
                fuzz_list,
                fuzz_rewrite,
                fuzz_unterminated,
            ],
            weights=[20, 10, 20, 10, 6, 6, 2],
        )[0]
        parts.append(element_type())
    return "".join(parts)


def check_invariants(text, html, raw):
    """Return a description of the first violated invariant, or None."""
    if "<script>" in html:
        return "unescaped input markup in output"
    if BRACKET_SPAN.search(raw):
        return "bracket span left in raw rendering"
    return None


def run_fuzzer(num_tests, seed=None, verbose=False, save_failures=False):
    """Run the fuzzer against the renderer."""
    from bbhtml import BBCode

    if seed is not None:
        random.seed(seed)

    bbcode = BBCode(collect_errors=True)

    crashes = []
    hangs = []
    violations = []
    successes = 0

    print(f"Fuzzing bbhtml with {num_tests} test cases...")
    start_time = time.time()

    for i in range(num_tests):
        text = generate_fuzzed_bbcode()

        if verbose and i % 100 == 0:
            print(f"  Test {i}/{num_tests}...")

        try:
            start = time.perf_counter()
            html = bbcode.render(text, escape=True, keep_lines=random.random() < 0.5)
            raw = bbcode.render_raw(text)
            elapsed = time.perf_counter() - start

            # Check for hangs (>5 seconds)
            if elapsed > 5.0:
                hangs.append({
                    "test_num": i,
                    "text": text,
                    "time": elapsed,
                })
                if verbose:
                    print(f"  HANG: Test {i} took {elapsed:.2f}s")
            else:
                successes += 1

            problem = check_invariants(text, html, raw)
            if problem:
                violations.append({"test_num": i, "text": text, "problem": problem})
        except Exception as e:
            crashes.append({
                "test_num": i,
                "text": text,
                "error": str(e),
                "traceback": traceback.format_exc(),
            })
            if verbose:
                print(f"  CRASH: Test {i}: {e}")

    elapsed_total = time.time() - start_time

    # Report results
    print(f"\n{'='*60}")
    print("FUZZING RESULTS: bbhtml")
    print(f"{'='*60}")
    print(f"Total tests:    {num_tests}")
    print(f"Successes:      {successes}")
    print(f"Crashes:        {len(crashes)}")
    print(f"Hangs (>5s):    {len(hangs)}")
    print(f"Violations:     {len(violations)}")
    print(f"Total time:     {elapsed_total:.2f}s")
    print(f"Tests/second:   {num_tests/max(elapsed_total, 1e-9):.1f}")

    if crashes:
        print(f"\n{'='*60}")
        print("CRASH DETAILS:")
        print(f"{'='*60}")
        for crash in crashes[:10]:  # Show first 10
            print(f"\nTest #{crash['test_num']}:")
            print(f"  Input: {crash['text'][:200]!r}...")
            print(f"  Error: {crash['error']}")
        if len(crashes) > 10:
            print(f"\n... and {len(crashes) - 10} more crashes")

    if violations:
        print(f"\n{'='*60}")
        print("INVARIANT VIOLATIONS:")
        print(f"{'='*60}")
        for violation in violations[:10]:
            print(f"\nTest #{violation['test_num']}: {violation['problem']}")
            print(f"  Input: {violation['text'][:200]!r}...")

    if hangs:
        print(f"\n{'='*60}")
        print("HANG DETAILS:")
        print(f"{'='*60}")
        for hang in hangs[:5]:
            print(f"\nTest #{hang['test_num']} ({hang['time']:.2f}s):")
            print(f"  Input: {hang['text'][:200]!r}...")

    if save_failures and (crashes or hangs or violations):
        filename = f"fuzz_failures_bbhtml_{int(time.time())}.txt"
        with open(filename, "w", encoding="utf-8") as f:
            f.write("Fuzzing results for bbhtml\n")
            f.write(f"Seed: {seed}\n\n")
            for crash in crashes:
                f.write(f"=== CRASH #{crash['test_num']} ===\n")
                f.write(f"Input:\n{crash['text']}\n")
                f.write(f"Error: {crash['error']}\n")
                f.write(f"Traceback:\n{crash['traceback']}\n\n")
            for violation in violations:
                f.write(f"=== VIOLATION #{violation['test_num']}: {violation['problem']} ===\n")
                f.write(f"Input:\n{violation['text']}\n\n")
            for hang in hangs:
                f.write(f"=== HANG #{hang['test_num']} ({hang['time']:.2f}s) ===\n")
                f.write(f"Input:\n{hang['text']}\n\n")
        print(f"\nFailures saved to {filename}")

    return not crashes and not hangs and not violations


def main():
    parser = argparse.ArgumentParser(description="Fuzz the BBCode renderer with malformed input")
    parser.add_argument(
        "--num-tests", "-n",
        type=int,
        default=1000,
        help="Number of test cases to generate (default: 1000)",
    )
    parser.add_argument(
        "--seed", "-s",
        type=int,
        default=None,
        help="Random seed for reproducibility",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Verbose output",
    )
    parser.add_argument(
        "--save-failures",
        action="store_true",
        help="Save failures to a file",
    )
    parser.add_argument(
        "--sample",
        type=int,
        metavar="N",
        help="Just print N sample fuzzed documents (no rendering)",
    )

    args = parser.parse_args()

    if args.sample:
        if args.seed:
            random.seed(args.seed)
        for i in range(args.sample):
            print(f"=== Sample {i+1} ===")
            print(generate_fuzzed_bbcode())
            print()
        return

    success = run_fuzzer(
        args.num_tests,
        seed=args.seed,
        verbose=args.verbose,
        save_failures=args.save_failures,
    )

    sys.exit(0 if success else 1)


if __name__ == "__main__":
    main()
