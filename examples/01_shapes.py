#!/usr/bin/env python3
"""Example: Shapes — linktime

Declare an extension point, register two plugins without naming them
anywhere else, bootstrap, then query.

Usage:
    python examples/01_shapes.py

Requirements:
    pip install linktime-plugins
"""
from __future__ import annotations

import logging
from abc import ABC, abstractmethod

import linktime


@linktime.extension_point
class Shape(ABC):
    @abstractmethod
    def area(self) -> float: ...


@linktime.register_plugin
class Circle(Shape):
    def area(self) -> float:
        return 3.14


@linktime.register_plugin
class Square(Shape):
    def area(self) -> float:
        return 4.0


def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    print(f"linktime version: {linktime.__version__}")

    # Plugins in this module registered on import; bootstrap loads any
    # installed packages under the "linktime.plugins" entry-point group
    # and seals the catalog.
    report = linktime.bootstrap()
    print(f"Bootstrap: {report.plugin_count} plugin(s), {len(report.failed)} failure(s)")

    shapes = linktime.plugins_of(Shape)
    for shape in shapes:
        print(f"  {type(shape).__name__}: area={shape.area()}")
    print(f"Total area: {sum(shape.area() for shape in shapes):.2f}")


if __name__ == "__main__":
    main()
