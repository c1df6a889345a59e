"""refvar: composable read/write references over external mutable state."""

from importlib.metadata import version as _version

__version__ = _version("refvar")

from refvar.either import Either, Left, Right, Void, absurd
from refvar.gettable import GettableVar, apply, bind, fmap, make_gettable_var, pure
from refvar.settable import (
    SettableVar,
    choose,
    conquer,
    contramap,
    divide,
    lose,
    make_settable_var,
)
from refvar.var import Var, imap, make_var
from refvar.protocols import Gettable, Settable, Updatable, get, set, update
from refvar.adapters import attr_var, cell, context_var, item_var
# textual NOT auto-imported: opt-in only

__all__ = [
    "GettableVar",
    "SettableVar",
    "Var",
    "make_gettable_var",
    "make_settable_var",
    "make_var",
    "fmap",
    "pure",
    "apply",
    "bind",
    "contramap",
    "divide",
    "conquer",
    "choose",
    "lose",
    "imap",
    "Either",
    "Left",
    "Right",
    "Void",
    "absurd",
    "Gettable",
    "Settable",
    "Updatable",
    "get",
    "set",
    "update",
    "cell",
    "attr_var",
    "item_var",
    "context_var",
]
