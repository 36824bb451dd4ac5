"""
Interactive console for the ciphers.

Asks for a mode, a text and a key, prints the result, and keeps going
after key or text errors until the exit word or end of input.
"""
import argparse
import logging
from collections.abc import Callable, Sequence

from cyrcipher.core.config import get_settings
from cyrcipher.core.exceptions import CipherLabError
from cyrcipher.core.logging import configure_logging
from cyrcipher.models.schemas import CipherType
from cyrcipher.services.engines.registry import EngineRegistry
from cyrcipher.services.engines.transposition.route import RouteTranspositionCipher
from cyrcipher.services.preprocessing.normalizer import NormalizationMode, TextNormalizer

logger = logging.getLogger(__name__)

ENCODE_WORDS = frozenset({"encode", "e"})
DECODE_WORDS = frozenset({"decode", "d"})
EXIT_WORDS = frozenset({"выход", "exit", "quit", "q"})

DEMO_CASES = [
    ("pROceSsIng", 5),
    ("pROceSsIng", 7),
    ("GRTMNEBYMD", 3),
]

InputFunc = Callable[[str], str]
OutputFunc = Callable[[str], None]


class CipherShell:
    """Prompt loop around one cipher type."""

    def __init__(
        self,
        cipher_type: CipherType,
        input_func: InputFunc | None = None,
        output: OutputFunc | None = None,
    ):
        self.cipher_type = cipher_type
        self.registry = EngineRegistry()
        self.normalizer = TextNormalizer()
        self._input = input_func or input
        self._output = output or print

    def run(self) -> int:
        """Run until the exit word or EOF. Returns the number of errors reported."""
        errors = 0
        while True:
            try:
                mode = self._input("Encode/Decode/Выход: ").strip().lower()
            except EOFError:
                break

            if mode in EXIT_WORDS:
                break
            if mode not in ENCODE_WORDS and mode not in DECODE_WORDS:
                self._output(f"Unknown mode: {mode!r}")
                continue

            try:
                text = self._read_line("Text: ", self._composes_text())
                key = self._read_line("Key: ")
            except EOFError:
                break

            try:
                self._output(self.handle(mode in ENCODE_WORDS, text, key))
            except CipherLabError as e:
                errors += 1
                self._output(f"Error: {e.message}")

        return errors

    def handle(self, encode: bool, text: str, key: str) -> str:
        """Apply one transform; raises CipherLabError subclasses."""
        engine = self.registry.create(self.cipher_type, key)
        engine.check_limits(get_settings().max_text_length)
        if encode:
            return engine.encrypt(text)
        return engine.decrypt(text)

    def _read_line(self, prompt: str, compose: bool = True) -> str:
        return self.normalizer.normalize(self._input(prompt), NormalizationMode.LINE, compose)

    def _composes_text(self) -> bool:
        return self.registry.get_engine_class(self.cipher_type).composes_input


def run_demo(output: OutputFunc = print) -> None:
    """Encode and decode the sample texts with the route cipher."""
    for text, key in DEMO_CASES:
        try:
            cipher = RouteTranspositionCipher(key)
            encoded = cipher.encode(text)
            output(encoded)
            output(cipher.decode(encoded))
        except CipherLabError as e:
            output(f"Error: {e.message}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cyrcipher",
        description="Route transposition and polyalphabetic ciphers for Russian text.",
    )
    parser.add_argument(
        "--cipher",
        choices=[t.value for t in CipherType],
        default=CipherType.POLYALPHABETIC.value,
        help="cipher to use in the interactive loop (default: %(default)s)",
    )
    parser.add_argument(
        "--demo",
        action="store_true",
        help="run the route cipher sample cases and exit",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="override the configured log level",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level or get_settings().log_level)

    if args.demo:
        run_demo()
        return 0

    shell = CipherShell(CipherType(args.cipher))
    errors = shell.run()
    logger.debug("shell finished with %d reported errors", errors)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
