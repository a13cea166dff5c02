import argparse
import logging
import os
import sys
from typing import Optional
from extcrypto import api
from extcrypto.config import LOG_LEVEL_ENV
from extcrypto.operations.operation import OperationVariant
from extcrypto.result import CallResult

PRIVATE_KEY_PERMISSIONS = 0o600
STDIO_PATH = "-"

logger = logging.getLogger(__name__)

def resolveLogLevel(name: Optional[str]) -> int:
    # getLevelName maps unknown names to a "Level x" string
    level = logging.getLevelName((name or "INFO").strip().upper())
    if not isinstance(level, int):
        return logging.INFO
    return level

def configureLogging(verbose: bool) -> None:
    level = logging.DEBUG
    if not verbose:
        level = resolveLogLevel(os.environ.get(LOG_LEVEL_ENV))
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr
    )

def saveFile(filename: str, content: str, permissions: Optional[int] = None) -> None:
    if permissions is None:
        with open(filename, "w") as f:
            f.write(content)
        return
    # Restrict the file before any content reaches it, including a
    # file that already exists with wider permissions
    fd = os.open(filename, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, permissions)
    try:
        os.fchmod(fd, permissions)
    except BaseException:
        os.close(fd)
        raise
    with os.fdopen(fd, "w") as f:
        f.write(content)

def readFile(filename: str) -> str:
    if filename == STDIO_PATH:
        return sys.stdin.read()
    with open(filename, "r") as f:
        return f.read()

def emit(result: CallResult, output: str, permissions: Optional[int] = None) -> int:
    if not result.ok:
        print(f"error: {result.error}", file=sys.stderr)
        return 1
    if output == STDIO_PATH:
        sys.stdout.write(result.value)
    else:
        saveFile(output, result.value, permissions)
        logger.info(f"Wrote {output}")
    return 0

def keygenCommand(args: argparse.Namespace) -> int:
    return emit(api.keygen(), args.output, PRIVATE_KEY_PERMISSIONS)

def extractCommand(args: argparse.Namespace, parser: argparse.ArgumentParser) -> int:
    try:
        pem = readFile(args.input)
    except OSError as e:
        parser.error(f"cannot read {args.input}: {e.strerror}")
    return emit(api.extract(pem), args.output)

def buildParser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="extcrypto",
        description="Generate RSA private keys and extract their public keys as PEM"
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True)
    keygen = subparsers.add_parser(
        str(OperationVariant.KEYGEN),
        help="generate a 2048 bit RSA private key"
    )
    keygen.add_argument("-o", "--output", default=STDIO_PATH, help="output file (default: stdout)")
    extract = subparsers.add_parser(
        str(OperationVariant.EXTRACT),
        help="extract the public key from a PEM private key"
    )
    extract.add_argument("input", nargs="?", default=STDIO_PATH, help="private key file (default: stdin)")
    extract.add_argument("-o", "--output", default=STDIO_PATH, help="output file (default: stdout)")
    return parser

def main(argv: Optional[list[str]] = None) -> int:
    parser = buildParser()
    args = parser.parse_args(argv)
    configureLogging(args.verbose)
    api.initialize()
    if args.command == str(OperationVariant.KEYGEN):
        return keygenCommand(args)
    return extractCommand(args, parser)

if __name__ == "__main__":
    sys.exit(main())
