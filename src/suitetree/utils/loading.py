"""Resolve ``module:attribute`` targets to a TestRunner."""

from __future__ import annotations

import importlib
import os
import sys

from suitetree.core.runner import TestRunner


def load_runner(module_name: str, attribute: str) -> TestRunner:
	"""
	Import a module and resolve a runner from one of its attributes.

	The attribute may be a TestRunner or a zero-argument callable
	returning one. Dotted attributes are followed. The current working
	directory is importable, so a tree defined in ``./mytree.py``
	resolves as ``mytree:runner``.

	Parameters:
		module_name: Importable module path.
		attribute: Attribute path inside the module.

	Returns:
		The resolved runner.

	Raises:
		ValueError: If the module or attribute is missing, the factory
			fails, or the result is not a TestRunner.
	"""
	cwd = os.getcwd()
	if cwd not in sys.path:
		sys.path.insert(0, cwd)
	try:
		obj = importlib.import_module(module_name)
	except ImportError as exc:
		raise ValueError(f"cannot import {module_name}: {exc}") from exc
	for part in attribute.split("."):
		try:
			obj = getattr(obj, part)
		except AttributeError as exc:
			raise ValueError(
			    f"{module_name} has no attribute {attribute}") from exc
	if callable(obj) and not isinstance(obj, TestRunner):
		try:
			obj = obj()
		except Exception as exc:  # noqa: BLE001
			raise ValueError(
			    f"{module_name}:{attribute} failed: {exc}") from exc
	if not isinstance(obj, TestRunner):
		raise ValueError(f"{module_name}:{attribute} is not a TestRunner "
		                 f"(got {type(obj).__name__})")
	return obj


__all__ = ["load_runner"]
