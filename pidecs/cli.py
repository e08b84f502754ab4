import time

import click

from .engine import digits_one_each, generate, pi_decimal_string
from .formats import BINARY_MODES, COMPRESSIONS, FORMATS, apply_compression, output_filename, serialize_payload
from .verify import REFERENCES, verify_digits


def _generate_timed(digits: int, verbose: bool):
    started = time.perf_counter()
    try:
        state = generate(digits)
    except ValueError as e:
        raise click.ClickException(str(e))
    if verbose:
        click.echo(f"generated {digits} digits in {time.perf_counter() - started:.3f}s", err=True)
    return state


def _verify_or_fail(digits: bytes, samples: int, reference: str):
    ok, kind, index = verify_digits(digits, samples, reference)
    if not ok:
        raise click.ClickException(f"verification failed ({kind}) at digit {index}")
    return kind


@click.group(context_settings={"help_option_names": ["-h", "--help"], "auto_envvar_prefix": "PIDECS"})
def main():
    pass


@main.command(name="generate")
@click.option("--digits", default=1000, show_default=True, type=click.IntRange(min=1))
@click.option("--format", "fmt", type=click.Choice(FORMATS, case_sensitive=False), default="txt", show_default=True)
@click.option("--binary-mode", type=click.Choice(BINARY_MODES, case_sensitive=False), default="ascii digits", show_default=True)
@click.option("--compression", type=click.Choice(COMPRESSIONS, case_sensitive=False), default="none", show_default=True)
@click.option("--verify/--no-verify", default=False, show_default=True)
@click.option("--verify-samples", default=1000, show_default=True, type=int)
@click.option("--reference", type=click.Choice(REFERENCES, case_sensitive=False), default="mpmath", show_default=True)
@click.option("--out", "out_path", default="pi", show_default=True)
@click.option("--verbose", is_flag=True)
def generate_cmd(
    digits: int,
    fmt: str,
    binary_mode: str,
    compression: str,
    verify: bool,
    verify_samples: int,
    reference: str,
    out_path: str,
    verbose: bool,
):
    fmt = fmt.lower().strip()
    state = _generate_timed(digits, verbose)
    try:
        payload, _ = serialize_payload(state, fmt, binary_mode=binary_mode)
        payload, suffix = apply_compression(payload, compression)
    except ValueError as e:
        raise click.ClickException(str(e))
    filename = output_filename(out_path, fmt, suffix)
    with open(filename, "wb") as f:
        f.write(payload)
    if verify:
        _verify_or_fail(digits_one_each(state), verify_samples, reference)
    click.echo(filename)


@main.command(name="print")
@click.argument("counts", nargs=-1, required=True, type=click.IntRange(min=1))
def print_cmd(counts):
    for count in counts:
        click.echo(pi_decimal_string(count))


@main.command()
@click.option("--digits", default=1000, show_default=True, type=click.IntRange(min=1))
@click.option("--reference", type=click.Choice(REFERENCES, case_sensitive=False), default="mpmath", show_default=True)
@click.option("--verbose", is_flag=True)
def check(digits: int, reference: str, verbose: bool):
    state = _generate_timed(digits, verbose)
    kind = _verify_or_fail(digits_one_each(state), digits, reference.lower())
    click.echo(f"ok ({kind}, {digits} digits)")
