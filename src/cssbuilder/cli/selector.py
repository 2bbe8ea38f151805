"""CLI command: cssbuilder selector -- render a simple selector."""

from __future__ import annotations

import click

from cssbuilder.selector import SimpleSelector, css_selector_builder


@click.command()
@click.option("--element", "element_name", default=None, help="Element (type) name")
@click.option("--id", "id_name", default=None, help="Id, without the leading '#'")
@click.option("--class", "class_names", multiple=True, help="Class name (repeatable)")
@click.option("--attr", "attributes", multiple=True, help="Attribute expression (repeatable)")
@click.option("--pseudo-class", "pseudo_classes", multiple=True, help="Pseudo-class (repeatable)")
@click.option("--pseudo-element", "pseudo_element", default=None, help="Pseudo-element")
def selector(
    element_name: str | None,
    id_name: str | None,
    class_names: tuple[str, ...],
    attributes: tuple[str, ...],
    pseudo_classes: tuple[str, ...],
    pseudo_element: str | None,
) -> None:
    """Build a simple selector from its parts and print it.

    Parts are applied in CSS order regardless of the order of the options.
    """
    steps: list[tuple[str, str]] = []
    if element_name is not None:
        steps.append(("element", element_name))
    if id_name is not None:
        steps.append(("id", id_name))
    steps.extend(("class_", name) for name in class_names)
    steps.extend(("attr", expr) for expr in attributes)
    steps.extend(("pseudo_class", name) for name in pseudo_classes)
    if pseudo_element is not None:
        steps.append(("pseudo_element", pseudo_element))

    if not steps:
        raise click.UsageError("At least one selector part is required.")

    method, value = steps[0]
    node: SimpleSelector = getattr(css_selector_builder, method)(value)
    for method, value in steps[1:]:
        node = getattr(node, method)(value)

    click.echo(node.stringify())
