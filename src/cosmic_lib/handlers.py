"""
Built-in click handlers.

Rendered fields are modelled as a ``FieldNode`` tree and user interaction
goes through an ``Interface`` adapter, so the default handlers work outside
of a browser.
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional
import logging

from .event import ClickEvent

logger = logging.getLogger(__name__)

ISSUER_CLASS = "CL_assetIssuer"
SIGNERS_CLASS = "CL_signers"


@dataclass
class FieldNode:
    """A rendered transaction field."""

    field_type: Optional[str] = None
    value: Any = None
    css_class: str = ""
    extra: Optional[Dict[str, Any]] = None
    visible: bool = True
    parent: Optional["FieldNode"] = field(default=None, repr=False)
    children: List["FieldNode"] = field(default_factory=list, repr=False)

    def append(self, child: "FieldNode") -> "FieldNode":
        """Attach ``child`` under this node and return it."""
        child.parent = self
        self.children.append(child)
        return child

    def grab(self, css_class: str) -> Optional["FieldNode"]:
        """First descendant carrying ``css_class`` (depth first)."""
        for child in self.children:
            if child.css_class == css_class:
                return child
            found = child.grab(css_class)
            if found is not None:
                return found
        return None

    def ancestor(self, levels: int) -> Optional["FieldNode"]:
        """Walk ``levels`` parents up, None if the tree is not that deep."""
        node: Optional[FieldNode] = self
        for _ in range(levels):
            if node is None:
                return None
            node = node.parent
        return node


class Interface(ABC):
    """User interaction adapter used by the built-in click handlers."""

    @abstractmethod
    def alert(self, message: str) -> None:
        """Show message to the user."""
        pass

    @abstractmethod
    def prompt(self, question: str) -> Optional[str]:
        """Ask question, None when no answer can be read."""
        pass

    @abstractmethod
    def copy(self, text: str) -> None:
        """Put text on the clipboard."""
        pass


class TerminalInterface(Interface):
    """Interface writing to stdout and reading answers from stdin."""

    def __init__(self, output: Callable[[str], Any] = print, ask: Callable[[str], str] = input):
        self._output = output
        self._ask = ask
        self.clipboard: Optional[str] = None

    def alert(self, message: str) -> None:
        self._output(message)

    def prompt(self, question: str) -> Optional[str]:
        try:
            return self._ask(question)
        except EOFError:
            return None

    def copy(self, text: str) -> None:
        self.clipboard = text
        logger.info("Value copied")


def address_handler(event: ClickEvent, interface: Interface) -> None:
    """Show the supplementary fields of an address, if it has any."""
    extra = getattr(event.node, "extra", None)
    if not extra:
        return
    message = ""
    for name, value in extra.items():
        message += f"{name}:\n{value}\n\n"
    interface.alert(message)


def asset_handler(event: ClickEvent, interface: Interface) -> None:
    """Toggle the issuer of the clicked asset."""
    issuer = event.node.grab(ISSUER_CLASS)
    if issuer is None:
        return
    issuer.visible = not issuer.visible


def hash_handler(event: ClickEvent, interface: Interface) -> None:
    """
    Ask for a preimage when the hash is a signer, copy it otherwise.

    An empty answer to the preimage prompt is ignored.
    """
    great_grandparent = event.node.ancestor(3)
    if great_grandparent is not None and great_grandparent.css_class == SIGNERS_CLASS:
        preimage = interface.prompt("Please enter preimage:")
        if preimage:
            event.cosmic_link.sign(preimage)
    else:
        interface.copy(event.value)


def default_click_handlers(owner) -> Dict[str, Callable[[ClickEvent], None]]:
    """
    The ``address``, ``asset`` and ``hash`` handlers.

    ``owner.interface`` is read on every click, so replacing the interface
    of a configuration redirects the built-in handlers.
    """
    return {
        "address": lambda event: address_handler(event, owner.interface),
        "asset": lambda event: asset_handler(event, owner.interface),
        "hash": lambda event: hash_handler(event, owner.interface),
    }


__all__ = [
    "FieldNode",
    "Interface",
    "TerminalInterface",
    "address_handler",
    "asset_handler",
    "hash_handler",
    "default_click_handlers",
]
