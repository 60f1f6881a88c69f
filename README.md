# ibflex

Small helpers for looking at an Interactive Brokers FLEX XML statement
before it is parsed in full. Everything lives in the `ibflex.version`
module.

## Installation

```
pip install ibflex
```

## Usage

### Schema version

`detect_version(xml)` searches the text for the first occurrence of
`version="` and reads the value up to the next `"`:

- a value of `3` gives `FlexSchemaVersion.V3`;
- any other value gives `FlexSchemaVersion.UNKNOWN`;
- if there is no `version="` at all, or its value is never closed by a
  quote, the result is `FlexSchemaVersion.V3`.

The search is plain text, so the first match wins wherever it is. A document
that starts with an XML declaration such as `<?xml version="1.0" ...?>`
reports `FlexSchemaVersion.UNKNOWN`, because the declaration's own
`version` attribute is found first.

```python
from ibflex.version import FlexSchemaVersion, detect_version

xml = '<FlexQueryResponse queryName="test" type="AF" version="3">'
assert detect_version(xml) is FlexSchemaVersion.V3

assert detect_version('<FlexQueryResponse queryName="test">') is FlexSchemaVersion.V3
assert detect_version('<FlexQueryResponse version="4">') is FlexSchemaVersion.UNKNOWN
```

### Statement type

`detect_statement_type(xml)` skips leading whitespace and an XML
declaration, then looks at the root element:

| Root element                       | Result                             |
|------------------------------------|------------------------------------|
| `<FlexQueryResponse ...>`          | `StatementType.ACTIVITY`           |
| `<FlexStatement ...>`              | `StatementType.ACTIVITY`           |
| `<TradeConfirmationStatement ...>` | `StatementType.TRADE_CONFIRMATION` |

Any other root element, or text with no element at all, raises
`FlexParseError`. Its message includes up to the first 100 characters of the
document from the root element onwards, and `str(err)` reads
`XML parse error: <message>`. The exception also carries `message` and
`location` attributes; `location` is `None` for errors raised here.

```python
from ibflex.version import FlexParseError, StatementType, detect_statement_type

xml = """<?xml version="1.0" encoding="UTF-8"?>
<TradeConfirmationStatement accountId="U0000000">
    <Trades />
</TradeConfirmationStatement>"""
assert detect_statement_type(xml) is StatementType.TRADE_CONFIRMATION

try:
    detect_statement_type("<Invalid>XML</Invalid>")
except FlexParseError as err:
    print(err)
```

## What this package does not do

It only inspects the start of a document. It does not parse statements into
trades, positions, cash transactions or any other records, does not check
that the XML is well formed, and does not download statements from the FLEX
web service.

## Running the tests

```
pip install -e ".[test]"
pytest
```