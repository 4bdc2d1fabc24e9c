"""Quickstart example for tongues.

Translates a handful of keys from the bundled locales/ directory:

1. Plain lookup with arguments
2. Locale selection and document fallback chains
3. Styling markup, with and without color
4. Error handling with structured diagnostics

Run from the repository root:

    python examples/quickstart.py
"""

from pathlib import Path

from tongues import KeyNotFound, Translator
from tongues.localization import FallbackInfo

LOCALES = Path(__file__).parent / "locales"


def log_fallback(info: FallbackInfo) -> None:
    print(f"  [fallback] {info.requested_locale} -> {info.fallback_locale} "
          f"(no '{info.missing_segment}' in {Path(info.source_path).name})")


translator = Translator(LOCALES, on_fallback=log_fallback)

# Example 1: Simple message
print("=" * 50)
print("Example 1: Simple Message")
print("=" * 50)

print(translator.translate("greeting.hello", {"name": "Ada"}, locale="en_US.UTF-8"))
# Output: Hello, Ada!

# Example 2: Locale selection
print("\n" + "=" * 50)
print("Example 2: Locale Selection and Fallback")
print("=" * 50)

for locale in ("fr_FR.UTF-8", "fr_CA@quebec", "lv_LV", "ja_JP"):
    result = translator.translate("greeting.hello", {"name": "Zoé"}, locale=locale)
    print(f"{locale:>14}: {result}")
# fr_CA@quebec picks fr_ca@quebec.toml; ja_JP has no file and ends at en.toml

print()
print(translator.translate("cart.checkout", locale="fr_CA@quebec"))
# fr_CA@quebec -> fr_FR -> en: Proceed to checkout

resolved = translator.resolve("cart.checkout", "lv")
print(f"  chain: {' -> '.join(resolved.fallback_chain)}")

# Example 3: Styling markup
print("\n" + "=" * 50)
print("Example 3: Styling Markup")
print("=" * 50)

for key, args in (
    ("status.ok", {"count": 42}),
    ("status.failed", {"log": "build.log"}),
    ("status.warning", {"text": "disk almost full"}),
    ("status.rainbow", None),
):
    print(translator.translate(key, args, locale="en"))
    print(translator.translate(key, args, locale="en", color=False))

# Example 4: Errors
print("\n" + "=" * 50)
print("Example 4: Error Diagnostics")
print("=" * 50)

try:
    translator.translate("greeting.missing", locale="fr")
except KeyNotFound as e:
    print(f"KeyNotFound: segment={e.segment!r} path={Path(e.path).name}")
    if e.diagnostic is not None:
        print(e.diagnostic.format_error())

print("\n" + "=" * 50)
print("[SUCCESS] All examples completed successfully!")
print("=" * 50)
