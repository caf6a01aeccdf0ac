"""Tests for GoTranslator — Python-like snippet -> Go."""

from __future__ import annotations

from polyglot.analyzer import analyze
from polyglot.targets.go import GoTranslator

PIPELINE_SOURCE = """\
def prepare_data(prices):
    # Normalise a price series
    scaler = MinMaxScaler(feature_range=(0, 1))
    scaled = scaler.fit_transform(np.array(prices).reshape(-1, 1))

    x, y = [], []
    LOOKBACK = 10

    for i in range(len(scaled) - LOOKBACK):
        x.append(scaled[i:i+LOOKBACK])
        y.append(scaled[i+LOOKBACK])

    return np.array(x), np.array(y)
"""


def _translate(source: str) -> str:
    return GoTranslator().translate(source, analyze(source))


class TestGoFunctionSignature:
    def test_price_param_is_float_slice(self):
        go = _translate("def f(prices):\n    return prices")
        assert "func f(prices []float64) (x, y [][]float64, err error) {" in go

    def test_index_param_is_int_and_context_kind_is_used(self):
        go = _translate('name = "bob"\ndef f(index, name):\n    return index')
        assert "func f(index int, name string)" in go

    def test_unknown_param_defaults_to_float_slice(self):
        go = _translate("def f(values):\n    return values")
        assert "func f(values []float64)" in go

    def test_default_value_is_stripped_from_param(self):
        go = _translate("def f(size=3):\n    return size")
        assert "func f(size int)" in go

    def test_missing_return_gets_default_error_return(self):
        go = _translate("def f(a):\n    print(a)")
        assert 'return nil, nil, fmt.Errorf("function not implemented")' in go


class TestGoStatements:
    def test_dual_init(self):
        go = _translate("a, b = [], []")
        assert "a := make([][]float64, 0)" in go
        assert "b := make([]float64, 0)" in go
        assert go.index("a := make") < go.index("b := make")

    def test_counting_loop(self):
        go = _translate("for i in range(10):\n    print(i)")
        assert "for i := 0; i < 10; i++ {" in go

    def test_len_minus_bound_is_guarded(self):
        go = _translate("for i in range(len(data) - n):\n    print(i)")
        assert "i < int(math.Max(0, float64(len(data) - n)))" in go
        assert '"math"' in go

    def test_print_uses_fmt(self):
        go = _translate('print("hi")')
        assert 'fmt.Println("hi")' in go

    def test_append_reassigns(self):
        go = _translate("xs.append(v)")
        assert "xs = append(xs, v)" in go

    def test_slice_kept(self):
        go = _translate("part = xs[1:3]")
        assert "xs[1:3]" in go

    def test_pair_return(self):
        go = _translate("def f(a, b):\n    return a, b")
        assert "return a, b, nil // Success" in go

    def test_comment_rewritten(self):
        go = _translate("# note\nx = 1")
        assert "// note" in go
        assert "# note" not in go


class TestGoBoilerplate:
    def test_function_less_snippet_gets_main(self):
        go = _translate('print("hi")')
        assert go.startswith("package main\n\nimport \"fmt\"\n\nfunc main() {\n")
        assert go.rstrip().endswith("}")

    def test_module_with_function_has_no_main(self):
        go = _translate("def f(a):\n    return a, a")
        assert go.startswith("package main")
        assert "func main()" not in go

    def test_window_constant_added_when_undeclared(self):
        go = _translate("for i in range(LOOKBACK):\n    print(i)")
        assert "const LOOKBACK = 10" in go

    def test_window_constant_skipped_when_assigned(self):
        go = _translate("LOOKBACK = 5\nprint(LOOKBACK)")
        assert "const LOOKBACK" not in go


class TestGoLibraryIdioms:
    def test_pipeline_translation(self):
        go = _translate(PIPELINE_SOURCE)
        assert "func prepare_data(prices []float64)" in go
        assert "mat.NewDense(len(prices), 1, prices)" in go
        assert "var scaled mat.Dense" in go
        assert "return x, y, nil // Success" in go
        assert '"gonum.org/v1/gonum/mat"' in go
        assert '"gonum.org/v1/gonum/stat"' in go
        assert go.count("{") == go.count("}")

    def test_reshape_untouched_without_numpy_detection(self):
        source = "v = np.array(d).reshape(2, 3)"
        go = GoTranslator().translate(source, analyze("v = 1"))
        assert "mat.NewDense" not in go
