from jsonschema import Draft202012Validator

from playerhub.core.errors import ConfigurationError

CATEGORY_TABLE_SCHEMA = {
  "type":"object",
  "required":["categories"],
  "properties":{
    "categories":{
      "type":"array",
      "minItems":1,
      "items":{
        "type":"object",
        "required":["key","name","weight","fields"],
        "properties":{
          "key":{"type":"string","minLength":1},
          "name":{"type":"string","minLength":1},
          "weight":{"type":"integer","minimum":0,"maximum":100},
          "fields":{"type":"array","minItems":1,"items":{
            "type":"object",
            "required":["key","label"],
            "properties":{
              "key":{"type":"string","minLength":1},
              "label":{"type":"string","minLength":1},
              "kind":{"enum":["text","number","collection","mapping","measurement"]}
            }
          }}
        }
      }
    }
  }
}

def validate_table_document(data)->None:
    errors = sorted(Draft202012Validator(CATEGORY_TABLE_SCHEMA).iter_errors(data), key=lambda e: [str(p) for p in e.path])
    if errors:
        raise ConfigurationError("Schema errors: " + "; ".join([e.message for e in errors]))
