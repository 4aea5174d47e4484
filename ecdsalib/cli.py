#!/usr/bin/env python3

# Copyright (C) 2024-2026 The ecdsalib developers
#
# This file is part of ecdsalib. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of ecdsalib including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"""Command line interface: key generation, signing, and verification.

Curve domains, keys, and signatures are exchanged as hex-line files
(see ecdsalib.storage), messages are signed through their SHA256 digest.

Without sub-command an interactive menu is started:
each file prompt is repeated until the file can be used.
"""

import argparse
import logging
import sys
from typing import Callable, Iterable, Optional, TypeVar

from ecdsalib import __version__, storage
from ecdsalib.dsa import MIN_SCALAR, gen_keys, sign_, verify_
from ecdsalib.exceptions import ECDSALibRuntimeError, ECDSALibValueError
from ecdsalib.hashes import sha256_file
from ecdsalib.utils import HEX_WIDTH, int_from_hex

logger = logging.getLogger(__name__)

_T = TypeVar("_T")

Input = Callable[[str], str]


def _prompt_until(prompt: str, action: Callable[[str], _T], input_: Input) -> _T:
    "Ask for a path until action succeeds on it."
    while True:
        path = input_(f"{prompt}: ").strip()
        try:
            return action(path)
        except (OSError, ValueError) as e:
            print(f"cannot use '{path}': {e}")


def _prv_key_from_text(text: str) -> Optional[int]:
    # empty text: random private key
    return int_from_hex(text, HEX_WIDTH) if text.strip() else None


# --- Interactive menu ---------------------------------------------------------


def _keygen_flow(input_: Input) -> None:
    ec = _prompt_until("curve domain file", storage.load_curve, input_)
    print(ec)
    prv_key = _prompt_until(
        "private key (hex, empty for random)", _prv_key_from_text, input_
    )
    keys = gen_keys(prv_key, ec)
    print(keys.to_json(indent=2))
    _prompt_until(
        "private key output file",
        lambda path: storage.save_prv_key(path, keys.prv_key),
        input_,
    )
    if not keys.pub_key:
        print("public key is INF: not saved")
        return
    _prompt_until(
        "public key output file",
        lambda path: storage.save_pub_key(path, keys.pub_key),
        input_,
    )


def _sign_flow(input_: Input) -> None:
    ec = _prompt_until("curve domain file", storage.load_curve, input_)
    print(ec)
    prv_key = _prompt_until("private key file", storage.load_prv_key, input_)
    digest = _prompt_until("message file", sha256_file, input_)
    print(f"sha256 = {digest}")
    sig = sign_(digest, prv_key, ec)
    print(sig.to_json(indent=2))
    _prompt_until(
        "signature output file", lambda path: storage.save_sig(path, sig), input_
    )


def _verify_flow(input_: Input) -> None:
    ec = _prompt_until("curve domain file", storage.load_curve, input_)
    print(ec)
    pub_key = _prompt_until("public key file", storage.load_pub_key, input_)
    sig = _prompt_until("signature file", storage.load_sig, input_)
    print(sig.to_json(indent=2))
    digest = _prompt_until("message file", sha256_file, input_)
    print(f"sha256 = {digest}")
    valid = verify_(digest, pub_key, sig, ec)
    print("valid signature" if valid else "INVALID signature")


_MENU = "1. generate keys\n2. sign a message\n3. verify a signature\n4. quit"


def menu(input_: Input = input) -> None:
    "Interactive loop, until quit or end of input."
    flows = {"1": _keygen_flow, "2": _sign_flow, "3": _verify_flow}
    try:
        while True:
            print(_MENU)
            choice = input_("> ").strip()
            if choice == "4":
                return
            if choice in flows:
                flows[choice](input_)
    except EOFError:
        print()


# --- Command handlers ---------------------------------------------------------


def _cmd_keygen(args: argparse.Namespace) -> int:
    ec = storage.load_curve(args.curve)
    prv_key = None if args.prv_key is None else int_from_hex(args.prv_key, HEX_WIDTH)
    keys = gen_keys(prv_key, ec)
    # INF has no coordinates: nothing is written
    if not keys.pub_key:
        raise ECDSALibValueError("INF public key cannot be saved")
    storage.save_prv_key(args.prv_out, keys.prv_key)
    storage.save_pub_key(args.pub_out, keys.pub_key)
    logger.info("key-pair saved to %s and %s", args.prv_out, args.pub_out)
    return 0


def _cmd_sign(args: argparse.Namespace) -> int:
    ec = storage.load_curve(args.curve)
    prv_key = storage.load_prv_key(args.prv_key)
    digest = sha256_file(args.message)
    sig = sign_(digest, prv_key, ec)
    storage.save_sig(args.sig_out, sig)
    logger.info("signature saved to %s", args.sig_out)
    return 0


def _cmd_verify(args: argparse.Namespace) -> int:
    ec = storage.load_curve(args.curve)
    pub_key = storage.load_pub_key(args.pub_key)
    sig = storage.load_sig(args.sig)
    digest = sha256_file(args.message)
    valid = verify_(digest, pub_key, sig, ec, args.min_scalar)
    print("VALID" if valid else "INVALID")
    return 0 if valid else 1


def _cmd_menu(args: argparse.Namespace) -> int:  # pylint: disable=unused-argument
    menu()
    return 0


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ecdsalib",
        description="ECDSA key generation, signing, and verification "
        "with hex-line curve, key, and signature files.",
    )
    parser.add_argument("--version", action="version", version=__version__)
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Log debug messages."
    )
    subparsers = parser.add_subparsers(dest="command")

    keygen_parser = subparsers.add_parser("keygen", help="Generate a key-pair.")
    keygen_parser.add_argument("curve", help="Curve domain file.")
    keygen_parser.add_argument("prv_out", help="Private key output file.")
    keygen_parser.add_argument("pub_out", help="Public key output file.")
    keygen_parser.add_argument(
        "--prv-key", help="Private key (hex); random if not provided."
    )
    keygen_parser.set_defaults(func=_cmd_keygen)

    sign_parser = subparsers.add_parser("sign", help="Sign a message file.")
    sign_parser.add_argument("curve", help="Curve domain file.")
    sign_parser.add_argument("prv_key", help="Private key file.")
    sign_parser.add_argument("message", help="Message file.")
    sign_parser.add_argument("sig_out", help="Signature output file.")
    sign_parser.set_defaults(func=_cmd_sign)

    verify_parser = subparsers.add_parser(
        "verify", help="Verify a signature (exit status 1 if invalid)."
    )
    verify_parser.add_argument("curve", help="Curve domain file.")
    verify_parser.add_argument("pub_key", help="Public key file.")
    verify_parser.add_argument("sig", help="Signature file.")
    verify_parser.add_argument("message", help="Message file.")
    verify_parser.add_argument(
        "--min-scalar",
        type=int,
        choices=(1, 2),
        default=MIN_SCALAR,
        help=f"Lowest accepted r and s (default: {MIN_SCALAR}).",
    )
    verify_parser.set_defaults(func=_cmd_verify)

    menu_parser = subparsers.add_parser("menu", help="Interactive menu (default).")
    menu_parser.set_defaults(func=_cmd_menu)

    return parser


def main(argv: Optional[Iterable[str]] = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(None if argv is None else list(argv))
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    func = getattr(args, "func", _cmd_menu)
    try:
        return func(args)
    except (OSError, ECDSALibValueError, ECDSALibRuntimeError) as e:
        print(f"ecdsalib: {e}", file=sys.stderr)
        return 2


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
