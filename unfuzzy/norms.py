"""Triangular norms (T-norms) and conorms (S-norms) used by the inference engine."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod

_TYPE_NAMES = {
    0: "Product",
    1: "Minimum",
    2: "Bounded Product",
    3: "Drastic Product",
    4: "Tp Family",
    5: "Hamacher Family",
    6: "Sugeno Family",
    7: "Frank Family",
    8: "Yager Family",
    9: "Dubois-Prade Family",
    10: "Maximum",
    11: "Bounded Sum",
    12: "Drastic Sum",
}


def norm_type_name(identifier: int) -> str:
    """Return the display name of the norm with this identifier, or "" if unknown."""
    return _TYPE_NAMES.get(identifier, "")


def _format_number(value: float) -> str:
    return "%g" % value


class Norm(ABC):
    """A binary fuzzy operator on membership degrees."""

    identifier: int = -1
    parameter: float = 0.0

    @abstractmethod
    def operate(self, x: float, y: float) -> float:
        """Apply the operator to two membership degrees."""

    @abstractmethod
    def to_s_norm(self) -> float:
        """Return 1.0 for a T-norm and 0.0 for an S-norm."""

    @abstractmethod
    def code_c(self) -> str:
        """Return the C statements that compute ``z`` from ``x`` and ``y``."""

    @abstractmethod
    def code_cpp(self) -> str:
        """Return the C++ constructor expression for this norm."""

    def type_name(self) -> str:
        """Return the display name of this norm."""
        return norm_type_name(self.identifier)

    def __repr__(self) -> str:
        if type(self).parameter is not self.parameter or "parameter" in vars(self):
            return f"{type(self).__name__}({self.parameter!r})"
        return f"{type(self).__name__}()"


class TNorm(Norm, ABC):
    """Base for triangular norms."""

    def to_s_norm(self) -> float:
        return 1.0


class SNorm(Norm, ABC):
    """Base for triangular conorms."""

    def to_s_norm(self) -> float:
        return 0.0


class _Parametric:
    """Mixin storing the family parameter."""

    default_parameter = 1.0

    def __init__(self, parameter: float | None = None) -> None:
        self.parameter = self.default_parameter if parameter is None else float(parameter)

    def _code_cpp(self) -> str:
        return f"{self._cpp_name}({_format_number(self.parameter)});"

    def _param_line(self) -> str:
        return f"    double p={_format_number(self.parameter)};\n"


class Product(TNorm):
    identifier = 0

    def operate(self, x, y):
        return x * y

    def code_c(self):
        return "    z=x*y;"

    def code_cpp(self):
        return "Producto();"


class Minimum(TNorm):
    identifier = 1

    def operate(self, x, y):
        return x if x < y else y

    def code_c(self):
        return (
            "    if(x<y)\n"
            "    {\n"
            "    \tz=x;\n"
            "    }else\n"
            "    {\n"
            "    \tz=y;\n"
            "    }"
        )

    def code_cpp(self):
        return "Minimo();"


class BoundedProduct(TNorm):
    identifier = 2

    def operate(self, x, y):
        z = x + y - 1
        return 0 if z < 0 else z

    def code_c(self):
        return (
            "    z=x+y-1;\n"
            "    if(z<0)\n"
            "    {\n"
            "    \tz=0;\n"
            "    }"
        )

    def code_cpp(self):
        return "ProductoAcotado();"


class DrasticProduct(TNorm):
    identifier = 3

    def operate(self, x, y):
        z = 0.0
        if y == 1:
            z = x
        if x == 1:
            z = y
        if x < 1 and y < 1:
            z = 0.0
        return z

    def code_c(self):
        return (
            "    if(y==1)\n"
            "    {\n"
            "    \tz=x;\n"
            "    }\n"
            "    if(x==1)\n"
            "    {\n"
            "    \tz=y;\n"
            "    }\n"
            "    if(x<1&&y<1)\n"
            "    {\n"
            "    \tz=0;\n"
            "    }"
        )

    def code_cpp(self):
        return "ProductoDrastico();"


class FamilyTp(_Parametric, TNorm):
    identifier = 4
    _cpp_name = "FamiliaTp"

    def operate(self, x, y):
        p = self.parameter
        a = math.pow(1 - x, p)
        b = math.pow(1 - y, p)
        z = a + b - a * b
        return 1 - math.pow(z, 1 / p)

    def code_c(self):
        return (
            self._param_line()
            + "    z=pow(1-x,p)+pow(1-y,p)-pow(1-x,p)*pow(1-y,p);\n"
            + "    z=1-pow(z,(1/p));"
        )

    def code_cpp(self):
        return self._code_cpp()


class FamilyHp(_Parametric, TNorm):
    """Hamacher family."""

    identifier = 5
    _cpp_name = "FamiliaHp"

    def operate(self, x, y):
        p = self.parameter
        z = p - (1 - p) * (x + y - x * y)
        return x * y / z

    def code_c(self):
        return (
            self._param_line()
            + "    z=p-(1-p)*(x+y-x*y);\n"
            + "    z=x*y/z;"
        )

    def code_cpp(self):
        return self._code_cpp()


class FamilyFp(_Parametric, TNorm):
    """Frank family."""

    identifier = 7
    default_parameter = 2.0
    _cpp_name = "FamiliaFp"

    def operate(self, x, y):
        p = self.parameter
        z = 1 + (math.pow(p, x) - 1) * (math.pow(p, y) - 1) / (p - 1)
        return math.log(z) / math.log(p)

    def code_c(self):
        return (
            self._param_line()
            + "    z=1+(pow(p,x)-1)*(pow(p,y)-1)/(p-1);\n"
            + "    z=log(z)/log(p);"
        )

    def code_cpp(self):
        return self._code_cpp()


class FamilyYp(_Parametric, TNorm):
    """Yager family."""

    identifier = 8
    _cpp_name = "FamiliaYp"

    def operate(self, x, y):
        p = self.parameter
        z = math.pow(1 - x, p) + math.pow(1 - y, p)
        z = math.pow(z, 1 / p)
        if z > 1:
            z = 1
        return 1 - z

    def code_c(self):
        return (
            self._param_line()
            + "    z=pow(1-x,p)+pow(1-y,p);\n"
            + "    z=pow(z,(1/p));\n"
            + "    if(z>1)\n"
            + "    {\n"
            + "    \tz=1;\n"
            + "    }\n"
            + "    z=1-z;"
        )

    def code_cpp(self):
        return self._code_cpp()


class FamilyAp(_Parametric, TNorm):
    """Dubois-Prade family."""

    identifier = 9
    _cpp_name = "FamiliaAp"

    def operate(self, x, y):
        z = x
        if y > z:
            z = y
        if self.parameter > z:
            z = self.parameter
        return x * y / z

    def code_c(self):
        return (
            self._param_line()
            + "    z=x;\n"
            + "    if(y>z)\n"
            + "    {\n"
            + "    \tz=y;\n"
            + "    }\n"
            + "    if(p>z)\n"
            + "    {\n"
            + "    \tz=p;\n"
            + "    }\n"
            + "    z=x*y/z;"
        )

    def code_cpp(self):
        return self._code_cpp()


class Maximum(SNorm):
    identifier = 10

    def operate(self, x, y):
        return x if x > y else y

    def code_c(self):
        return (
            "    if(x>y)\n"
            "    {\n"
            "    \tz=x;\n"
            "    }else\n"
            "    {\n"
            "    \tz=y;\n"
            "    }"
        )

    def code_cpp(self):
        return "Maximo();"


class BoundedSum(SNorm):
    identifier = 11

    def operate(self, x, y):
        z = x + y
        return 1 if z > 1 else z

    def code_c(self):
        return (
            "    z=x+y;\n"
            "    if(z>1)\n"
            "    {\n"
            "    \tz=1;\n"
            "    }"
        )

    def code_cpp(self):
        return "SumaAcotada();"


class DrasticSum(SNorm):
    identifier = 12

    def operate(self, x, y):
        z = 0.0
        if y == 0:
            z = x
        if x == 0:
            z = y
        if x > 0 and y > 0:
            z = 1.0
        return z

    def code_c(self):
        return (
            "    if(y==0)\n"
            "    {\n"
            "    \tz=x;\n"
            "    }\n"
            "    if(x==0)\n"
            "    {\n"
            "    \tz=y;\n"
            "    }\n"
            "    if(x>0&&y>0)\n"
            "    {\n"
            "    \tz=1;\n"
            "    }"
        )

    def code_cpp(self):
        return "SumaDrastica();"


class FamilySp(_Parametric, SNorm):
    """Sugeno family."""

    identifier = 6
    _cpp_name = "FamiliaSp"

    def operate(self, x, y):
        z = x + y + self.parameter * x * y
        return 1 if z > 1 else z

    def code_c(self):
        return (
            self._param_line()
            + "    z=x+y+p*x*y;\n"
            + "    if(z>1)\n"
            + "    {\n"
            + "    \tz=1;\n"
            + "    }"
        )

    def code_cpp(self):
        return self._code_cpp()