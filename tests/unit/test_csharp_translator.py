"""Tests for CSharpTranslator — Python-like snippet -> C#."""

from __future__ import annotations

from polyglot.analyzer import analyze
from polyglot.targets.csharp import CSharpTranslator


def _translate(source: str) -> str:
    return CSharpTranslator().translate(source, analyze(source))


class TestCSharpMethods:
    def test_signature_returns_tuple(self):
        cs = _translate("def f(prices, size):\n    return prices")
        assert "public static (double[][] x, double[] y) f(double[] prices, int size) {" in cs

    def test_pair_return(self):
        cs = _translate("def f(a, b):\n    return np.array(a), np.array(b)")
        assert "return (a.ToArray(), b.ToArray());" in cs

    def test_module_wrapped_in_class(self):
        cs = _translate("def f(a):\n    return a")
        assert "public class MLTranslator\n{" in cs
        assert "static void Main" not in cs


class TestCSharpStatements:
    def test_dual_init(self):
        cs = _translate("a, b = [], []")
        assert "var a = new List<double[]>();" in cs
        assert "var b = new List<double>();" in cs
        assert "using System.Collections.Generic;" in cs

    def test_loop_and_count(self):
        cs = _translate("for i in range(len(xs)):\n    print(i)")
        assert "for (var i = 0; i < xs.Count(); i++) {" in cs
        assert "using System.Linq;" in cs

    def test_append_adds(self):
        assert "xs.Add(v);" in _translate("xs.append(v)")

    def test_slice_uses_linq(self):
        assert "xs.Skip(2).Take(5 - 2).ToArray()" in _translate("p = xs[2:5]")

    def test_slice_from_start(self):
        assert "xs.Take(3).ToArray()" in _translate("p = xs[:3]")


class TestCSharpLibraries:
    def test_reshape_uses_mathnet(self):
        cs = _translate("m = np.array(data).reshape(-1, 1)")
        assert "Matrix<double>.Build.DenseOfColumnMajor(data.Count(), 1, data.ToArray())" in cs
        assert "using MathNet.Numerics.LinearAlgebra;" in cs

    def test_fit_transform_is_placeholder(self):
        cs = _translate("s = MinMaxScaler()\nscaled = s.fit_transform(data)")
        assert "var mlContext = new MLContext();" in cs
        assert "var scaled = new List<double[]>(); // Placeholder" in cs
        assert "using Microsoft.ML;" in cs


class TestCSharpBoilerplate:
    def test_function_less_snippet_gets_main(self):
        cs = _translate('print("hi")')
        assert cs == (
            "using System;\n\n"
            "public class Program\n{\n"
            "    public static void Main(string[] args)\n"
            "    {\n"
            '        Console.WriteLine("hi");\n'
            "    }\n"
            "}"
        )

    def test_window_constant(self):
        cs = _translate("def f(a):\n    return a[0:LOOKBACK]")
        assert "const int LOOKBACK = 10;" in cs
