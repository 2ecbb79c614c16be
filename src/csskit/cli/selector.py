"""CLI commands: csskit build / csskit combine -- render CSS selectors."""

from __future__ import annotations

import sys

import click

from csskit.selector import COMBINATORS, OrderViolation, Selector, css_selector_builder

# fragment kind on the command line -> Selector factory method
FRAGMENT_METHODS = {
    "element": "element",
    "id": "id",
    "class": "class_",
    "attr": "attr",
    "pseudo-class": "pseudo_class",
    "pseudo-element": "pseudo_element",
}


def _split_fragment(raw: str) -> tuple[str, str]:
    kind, sep, value = raw.partition("=")
    if not sep or kind not in FRAGMENT_METHODS:
        raise click.BadParameter(
            f"{raw!r} is not KIND=VALUE with KIND one of "
            f"{', '.join(FRAGMENT_METHODS)}",
            param_hint="FRAGMENTS",
        )
    return kind, value


@click.command()
@click.argument("fragments", nargs=-1, required=True)
def build(fragments: tuple[str, ...]) -> None:
    """Build a selector from KIND=VALUE fragments, applied in the order given.

    Example: csskit build element=a 'attr=href$=".png"' pseudo-class=focus
    """
    pairs = [_split_fragment(raw) for raw in fragments]

    selector = css_selector_builder
    try:
        for kind, value in pairs:
            selector = getattr(selector, FRAGMENT_METHODS[kind])(value)
    except OrderViolation as exc:
        click.echo(f"Selector error: {exc}", err=True)
        sys.exit(1)

    click.echo(selector.stringify())


@click.command()
@click.argument("left")
@click.argument("combinator", type=click.Choice(COMBINATORS))
@click.argument("right")
def combine(left: str, combinator: str, right: str) -> None:
    """Join two rendered selectors LEFT and RIGHT with COMBINATOR."""
    combined = css_selector_builder.combine(
        Selector(element_part=left), combinator, Selector(element_part=right)
    )
    click.echo(combined.stringify())
