"""Checklist task extraction from a markdown syntax tree."""

from __future__ import annotations

import logging
from typing import Optional

from .annotations import COMPLETED_ICON, DEADLINE_ICON, strip_annotation
from .models import Task
from .nodes import ListItem, Paragraph, Root, Text, iter_children, parse_markdown

logger = logging.getLogger(__name__)


def extract_task_text(node) -> Optional[tuple[str, bool]]:
    """
    Return (raw_text, checked) for a checklist item node.

    Rules:
    - Only list items with an explicit [ ] / [x] marker qualify
    - Text comes from the first text leaf of the first paragraph
    - Anything else returns None
    """
    if not isinstance(node, ListItem) or node.checked is None:
        return None

    paragraph = next((child for child in node.children if isinstance(child, Paragraph)), None)
    if paragraph is None:
        logger.debug("Skipping checklist item without a paragraph")
        return None

    leaf = next((child for child in paragraph.children if isinstance(child, Text)), None)
    if leaf is None:
        logger.debug("Skipping checklist item without a text leaf")
        return None

    return leaf.value, node.checked


def task_from_node(node) -> Optional[Task]:
    extracted = extract_task_text(node)
    if extracted is None:
        return None
    text, done = extracted

    deadline, text = strip_annotation(text, DEADLINE_ICON)
    completed_at, text = strip_annotation(text, COMPLETED_ICON)

    return Task(text=text, done=done, deadline=deadline, completed_at=completed_at)


def collect_tasks(root: Root) -> list[Task]:
    """Visit every node once and collect tasks in document order."""
    tasks: list[Task] = []
    stack = [root]
    while stack:
        node = stack.pop()
        task = task_from_node(node)
        if task is not None:
            tasks.append(task)
        # Reversed so the first child is visited next
        stack.extend(reversed(iter_children(node)))
    return tasks


def extract_tasks(content: str) -> list[Task]:
    """Parse markdown content and return its checklist tasks."""
    return collect_tasks(parse_markdown(content))
