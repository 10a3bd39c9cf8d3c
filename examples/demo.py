"""
jsonsift demonstration script.
"""

import jsonsift


def main():
    print("jsonsift - Relaxed JSON Extraction Demo")
    print("=" * 40)

    examples = [
        ("Log: {\"id\":1,\"msg\":'hi'} done", "JSON inside a log line"),
        ("{'name': 'O\\'Brien', 'pet': 'cat's toy'}", "Single quotes and apostrophes"),
        ('status=ok [1, 2, 3] then {"nested": {"deep": [true, null]}}', "Two fragments"),
        ("[see John's notes] {\"a\": 1}", "Stray apostrophe before JSON"),
        ("nothing to see here", "No JSON at all"),
    ]

    for i, (text, description) in enumerate(examples, 1):
        print(f"\n{i}. {description}")
        print(f"Input:     {text}")
        print(f"Filter:    {jsonsift.filter_json(text)!r}")
        print(f"Longest:   {jsonsift.filter_json(text, keep_longest=True)!r}")
        print(f"In place:  {jsonsift.format_in_place(text)!r}")

    print("\nFragments:")
    for fragment in jsonsift.scan_fragments(examples[2][0]):
        print(f"  {fragment.start}-{fragment.end}: {fragment.raw_text}")

    print("\nCompressed:")
    print(jsonsift.compress_json("{ 'a': [1, 2, 3], 'b': { 'c': null } }"))

    try:
        jsonsift.compress_json('{"a": 1,\n "b": }')
    except jsonsift.ParseError as e:
        print(f"Error:  {e}")


if __name__ == "__main__":
    main()
