"""Fuzzy implication operators used to relate antecedent and consequent."""

from __future__ import annotations

from abc import ABC, abstractmethod


class Implication(ABC):
    """A fuzzy implication between an antecedent and a consequent degree."""

    identifier: int = -1

    @abstractmethod
    def implies(self, x: float, y: float) -> float:
        """Return the implication degree of ``x`` implying ``y``."""

    @abstractmethod
    def default(self) -> float:
        """Return the value used when a rule does not fire."""

    @abstractmethod
    def code_c(self) -> str:
        """Return the C statements that compute ``rel`` from ``x`` and ``y``."""

    @abstractmethod
    def code_cpp(self) -> str:
        """Return the C++ constructor expression for this implication."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"

    def __eq__(self, other: object) -> bool:
        return type(self) is type(other)

    def __hash__(self) -> int:
        return hash(type(self))


class ImplicationTNorm(Implication, ABC):
    """Implications built from a T-norm; a rule that does not fire yields 0."""

    def default(self) -> float:
        return 0.0


class ImplicationIfThen(Implication, ABC):
    """Material (if-then) implications; a rule that does not fire yields 1."""

    def default(self) -> float:
        return 1.0


class ProductImplication(ImplicationTNorm):
    identifier = 0

    def implies(self, x, y):
        return x * y

    def code_c(self):
        return "    \trel=x*y;"

    def code_cpp(self):
        return "ImplicacionProducto();"


class MinimumImplication(ImplicationTNorm):
    identifier = 1

    def implies(self, x, y):
        return x if x < y else y

    def code_c(self):
        return (
            "    if(x<y)\r\n"
            "    {\r\n"
            "    \trel=x;\r\n"
            "    }else\r\n"
            "    {\r\n"
            "    \trel=y;\r\n"
            "    }"
        )

    def code_cpp(self):
        return "ImplicacionMinimo();"


class KleeneDienesImplication(ImplicationIfThen):
    identifier = 2

    def implies(self, x, y):
        x = 1 - x
        return x if x > y else y

    def code_c(self):
        return (
            "    x=1-x;\r\n"
            "    if(x>y)\r\n"
            "    \trel=x;\r\n"
            "    else\r\n"
            "    \trel=y;"
        )

    def code_cpp(self):
        return "ImplicacionKleenDienes();"


_MIN_THEN_COMPLEMENT_C = (
    "    if(x<y)\r\n"
    "    \trel=x;\r\n"
    "    else\r\n"
    "    \trel=y;\r\n"
    "    x=1-x;\r\n"
    "    if(rel<x)\r\n"
    "    \trel=x;"
)


class LukasiewiczImplication(ImplicationIfThen):
    identifier = 3

    def implies(self, x, y):
        rel = 1 - x + y
        return 1 if rel > 1 else rel

    def code_c(self):
        return _MIN_THEN_COMPLEMENT_C

    def code_cpp(self):
        return "ImplicacionLukasiewicz();"


class ZadehImplication(ImplicationIfThen):
    identifier = 4

    def implies(self, x, y):
        rel = x if x < y else y
        complement = 1 - x
        return complement if rel < complement else rel

    def code_c(self):
        return _MIN_THEN_COMPLEMENT_C

    def code_cpp(self):
        return "ImplicacionZadeh();"


class StochasticImplication(ImplicationIfThen):
    identifier = 5

    def implies(self, x, y):
        rel = x * y
        complement = 1 - x
        return complement if rel < complement else rel

    def code_c(self):
        return (
            "    rel=x*y;\r\n"
            "    x=1-x;\r\n"
            "    if(rel<x)\r\n"
            "    \trel=x;"
        )

    def code_cpp(self):
        return "ImplicacionEstocastica();"


class GoguenImplication(ImplicationIfThen):
    identifier = 6

    def implies(self, x, y):
        rel = y / x if x > 0.00001 else 1000
        return 1 if rel > 1 else rel

    def code_c(self):
        return (
            "    if(x>0.00001)\r\n"
            "    \trel=y/x;\r\n"
            "    else\r\n"
            "    \trel=1000;\r\n"
            "    if(rel>1)\r\n"
            "    \trel=1;"
        )

    def code_cpp(self):
        return "ImplicacionGoguen();"


class GodelImplication(ImplicationIfThen):
    identifier = 7

    def implies(self, x, y):
        return 1 if x <= y else y

    def code_c(self):
        return (
            "    if(x<=y)\r\n"
            "    \trel=1;\r\n"
            "    else\r\n"
            "    \trel=y;"
        )

    def code_cpp(self):
        return "ImplicacionGodel();"


class SharpImplication(ImplicationIfThen):
    identifier = 8

    def implies(self, x, y):
        return 1 if x <= y else 0

    def code_c(self):
        return (
            "    if(x<=y)\r\n"
            "    \trel=1;\r\n"
            "    else\r\n"
            "    \trel=0;"
        )

    def code_cpp(self):
        return "ImplicacionAguda();"