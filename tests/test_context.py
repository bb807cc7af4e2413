import copy
import json
import pickle
import unittest

from text_plugin import Context

class ContextTests(unittest.TestCase):
    def test_get_default(self):
        ctx = Context({"input": "hello"})
        self.assertEqual(ctx.get("input", ""), "hello")
        self.assertEqual(ctx.get("missing", "fallback"), "fallback")
        self.assertIsNone(ctx.get("missing"))

    def test_ordered(self):
        ctx = Context({"b": "1", "a": "2"}, c="3")
        self.assertEqual(list(ctx), ["b", "a", "c"])
        self.assertEqual(len(ctx), 3)

    def test_value_coercion(self):
        ctx = Context({"n": 5, "b": b"caf\xc3\xa9", "none": None})
        self.assertEqual(ctx["n"], "5")
        self.assertEqual(ctx["b"], "café")
        self.assertEqual(ctx["none"], "")

    def test_non_str_key_rejected(self):
        with self.assertRaises(TypeError):
            Context({1: "x"})

    def test_read_only(self):
        ctx = Context(input="x")
        with self.assertRaises(TypeError):
            ctx["input"] = "y"
        with self.assertRaises(TypeError):
            ctx._data = {}
        self.assertEqual(ctx["input"], "x")

    def test_of(self):
        ctx = Context(input="x")
        self.assertIs(Context.of(ctx), ctx)
        self.assertEqual(Context.of({"input": "y"}).get("input"), "y")
        self.assertTrue(Context.of(None).is_empty())

    def test_merged(self):
        base = Context(input="a", keep="k")
        over = base.merged({"input": "b", "extra": "e"})
        self.assertEqual(over.to_dict(), {"input": "b", "keep": "k", "extra": "e"})
        under = base.merged({"input": "b", "extra": "e"}, overwrite=False)
        self.assertEqual(under["input"], "a")
        self.assertEqual(under["extra"], "e")
        self.assertEqual(base["input"], "a")

    def test_filtered(self):
        ctx = Context(input="a", skip="b")
        self.assertEqual(ctx.filtered(lambda k, v: k != "skip").to_dict(), {"input": "a"})

    def test_has_and_json(self):
        ctx = Context(input="héllo")
        self.assertTrue(ctx.has("input"))
        self.assertFalse(ctx.has("other"))
        self.assertEqual(json.loads(ctx.to_json()), {"input": "héllo"})

    def test_equality_and_hash(self):
        self.assertEqual(Context(input="x"), Context({"input": "x"}))
        self.assertEqual(Context(input="x"), {"input": "x"})
        self.assertEqual(hash(Context(input="x")), hash(Context(input="x")))

    def test_copy_and_pickle(self):
        ctx = Context(input="x", other="y")
        for clone in (copy.copy(ctx), copy.deepcopy(ctx), pickle.loads(pickle.dumps(ctx))):
            self.assertIsInstance(clone, Context)
            self.assertEqual(clone, ctx)
            self.assertEqual(list(clone), ["input", "other"])
            with self.assertRaises(TypeError):
                clone._data = {}

    def test_variables_usable_as_key(self):
        ctx = Context(**{"variables": "x", "input": "y"})
        self.assertEqual(ctx["variables"], "x")
        self.assertEqual(Context({"a": "1"}, variables="v").to_dict(), {"a": "1", "variables": "v"})

if __name__ == "__main__":
    unittest.main()
