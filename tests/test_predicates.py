import unittest

from runtime_schema import T, SchemaError, check_schema, predicates
from runtime_schema.predicates import unwrap

VARIANT_PREDICATES = {
    "any":       predicates.is_any_type,
    "boolean":   predicates.is_boolean_type,
    "null":      predicates.is_null_type,
    "number":    predicates.is_number_type,
    "string":    predicates.is_string_type,
    "undefined": predicates.is_undefined_type,
    "array":     predicates.is_array_type,
    "tuple":     predicates.is_tuple_type,
    "record":    predicates.is_record_type,
    "object":    predicates.is_object_type,
}


class SchemaTypeTests(unittest.TestCase):
    def test_non_schemas_rejected(self):
        for value in (None, 1, "number", [], {}, {"type": 1}, {"type": "date"},
                      {"kind": "number"}, {"type": "array"}, {"type": "object"},
                      {"type": "object", "additionalProperties": None},
                      {"type": "modified", "item": {"type": "nope"}}):
            with self.subTest(value=value):
                self.assertFalse(predicates.is_schema_type(value))

    def test_nested_wrappers_rejected(self):
        inner = T.optional(T.number())
        self.assertFalse(predicates.is_schema_type({"type": "modified", "item": inner}))

    def test_check_is_shallow(self):
        self.assertTrue(predicates.is_schema_type(T.array({"type": "bogus"})))


class VariantPredicateTests(unittest.TestCase):
    def setUp(self):
        self.samples = {
            "any":       T.any(),
            "boolean":   T.boolean(),
            "null":      T.null(),
            "number":    T.number(maximum=3),
            "string":    T.string(),
            "undefined": T.undefined(),
            "array":     T.array(T.number()),
            "tuple":     T.tuple(T.number(), T.string()),
            "record":    T.record(T.string()),
            "object":    T.object({"a": T.number()}),
        }

    def test_exactly_one_predicate_holds(self):
        for name, schema in self.samples.items():
            for wrapped in (schema, T.optional(schema), T.readonly(T.optional(schema))):
                with self.subTest(variant=name, wrapped=wrapped is not schema):
                    matching = [n for n, pred in VARIANT_PREDICATES.items() if pred(wrapped)]
                    self.assertEqual(matching, [name])

    def test_empty_tuple_is_still_a_tuple(self):
        self.assertTrue(predicates.is_tuple_type(T.tuple()))
        self.assertFalse(predicates.is_array_type(T.tuple()))

    def test_record_uses_presence_not_truthiness(self):
        falsy = {"type": "object", "additionalProperties": {}}
        self.assertTrue(predicates.is_record_type(falsy))
        self.assertFalse(predicates.is_object_type(falsy))

    def test_unwrap(self):
        inner = T.number()
        self.assertIs(unwrap(T.optional(inner)), inner)
        self.assertIs(unwrap(inner), inner)


class CheckSchemaTests(unittest.TestCase):
    def test_valid_tree_passes(self):
        check_schema(T.object({
            "a": T.tuple(T.array(T.record(T.number())), T.optional(T.null())),
        }))  # should not raise

    def test_reports_path_of_bad_node(self):
        schema = T.object({"a": T.tuple(T.number(), {"type": "nope"})})
        with self.assertRaisesRegex(SchemaError, r"^/a/1: invalid schema node"):
            check_schema(schema)

    def test_root_path_rendered_as_slash(self):
        with self.assertRaisesRegex(SchemaError, r"^/: invalid schema node"):
            check_schema({"type": "nope"})

    def test_required_must_name_declared_properties(self):
        schema = {"type": "object", "properties": {"a": T.number()}, "required": ["b"]}
        with self.assertRaisesRegex(SchemaError, "'required'"):
            check_schema(schema)

    def test_required_entries_must_be_strings(self):
        for required in (5, "a", [["a"]]):
            with self.subTest(required=required):
                schema = {"type": "object", "properties": {"a": T.number()}, "required": required}
                with self.assertRaises(SchemaError):
                    check_schema(schema)


if __name__ == "__main__":
    unittest.main()
