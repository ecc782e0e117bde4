import os, sys, pdb, json, logging, re
import unittest as test

from hiccup import formats as fmts

class Codec(object):
    def __init__(self, ctype, name=None):
        self.content_type = ctype
        self.name = name or ctype

    def __repr__(self):
        return "Codec(%r)" % self.name

class TestFormatSupport(test.TestCase):

    def setUp(self):
        self.json = Codec("application/json")
        self.yaml = Codec("application/yaml")
        self.sprtd = fmts.FormatSupport([self.json, self.yaml])

    def test_ctor(self):
        sprtd = fmts.FormatSupport()
        self.assertEqual(len(sprtd), 0)
        self.assertIsNone(sprtd.default_format())
        self.assertEqual(sprtd.content_types(), [])

        self.assertEqual(len(self.sprtd), 2)
        self.assertIs(self.sprtd.default_format(), self.json)
        self.assertEqual(self.sprtd.content_types(), ["application/json", "application/yaml"])

    def test_support(self):
        goob = Codec("goob/gurn")
        self.sprtd.support(goob)
        self.assertIs(self.sprtd.match("goob/gurn"), goob)
        self.assertIs(self.sprtd.default_format(), self.json)
        self.assertIn("goob/gurn", self.sprtd)
        self.assertNotIn("goob/gomer", self.sprtd)

        self.sprtd.support(goob, asdefault=True)
        self.assertIs(self.sprtd.default_format(), goob)

        with self.assertRaises(ValueError):
            self.sprtd.support(Codec("goob/"))
        with self.assertRaises(ValueError):
            self.sprtd.support(Codec(""))

    def test_support_duplicate(self):
        json2 = Codec("application/json", "json2")
        self.sprtd.support(json2)
        self.assertEqual(len(self.sprtd), 2)
        self.assertIs(self.sprtd.match("application/json"), json2)

        # the first one registered remains the default
        self.assertIs(self.sprtd.default_format(), self.json)
        self.assertIs(self.sprtd.resolve(""), self.json)

    def test_match(self):
        self.assertIs(self.sprtd.match("application/json"), self.json)
        self.assertIs(self.sprtd.match("application/yaml"), self.yaml)
        self.assertIs(self.sprtd.match("Application/YAML"), self.yaml)
        self.assertIsNone(self.sprtd.match("text/plain"))
        self.assertIsNone(self.sprtd.match("*/*"))
        self.assertIsNone(self.sprtd.match(""))
        self.assertIsNone(self.sprtd.match(None))

    def test_resolve(self):
        self.assertIs(self.sprtd.resolve("application/yaml"), self.yaml)
        self.assertIs(self.sprtd.resolve("application/json"), self.json)
        self.assertIs(self.sprtd.resolve("text/plain"), self.json)
        self.assertIs(self.sprtd.resolve(""), self.json)
        self.assertIs(self.sprtd.resolve(None), self.json)

        sprtd = fmts.FormatSupport()
        self.assertIsNone(sprtd.resolve("application/json"))
        self.assertIsNone(sprtd.resolve(""))

    def test_bare_token(self):
        jsontok = Codec("json")
        self.sprtd.support(jsontok)
        self.assertIs(self.sprtd.match("json"), jsontok)
        self.assertIs(self.sprtd.match("JSON"), jsontok)
        self.assertIs(self.sprtd.resolve("yaml"), self.json)

        with self.assertRaises(ValueError):
            self.sprtd.support(Codec("text/plain; charset=utf-8"))


if __name__ == '__main__':
    test.main()
