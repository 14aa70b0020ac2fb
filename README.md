# seimei

Find Japanese given names that score well under the stroke-count method of
name fortune telling (姓名判断).

For a family name, `seimei` generates candidate given names, works out the
five "kaku" (天格, 人格, 地格, 外格, 総格) from the stroke counts of the
characters, ranks each from 大凶 to 大大吉, guesses from lists of readings
whether a reading is used for boys, girls or both, and keeps only the names
that pass a filter you describe in JSON. Results are written as
tab-separated values.

## Installation

```
pip install .
```

Python 3.10 or later is required. The package has no third-party
dependencies.

## Data files

The kanji dictionaries and name lists are read at run time from a data
directory: `seimei/data/` next to the package, or the directory named by the
environment variable `SEIMEI_DATA_DIR`. The package does not ship these
files; the commands need them to be present:

| path                  | content                                                        |
|-----------------------|----------------------------------------------------------------|
| `joyo/strokes.json`   | array of `{"kanji": "山", "strokes": 3}`                       |
| `jinmei/strokes.json` | same form                                                      |
| `kana/strokes.json`   | same form; each kana's reading is its katakana form            |
| `joyo/yomi.json`      | array of `{"kanji": "太", "yomi": ["タ", "タイ"]}`             |
| `jinmei/yomi.json`    | same form                                                      |
| `sex/male.json`       | array of readings used for boys                                |
| `sex/female.json`     | array of readings used for girls                               |
| `gen/mei.json`        | object mapping a reading to an array of common written names   |
| `filter/common.json`  | array of common readings, used by the `commonYomi` filter      |

A character that appears in more than one of the joyo, jinmei and kana
dictionaries is an error. Only characters that have both a stroke count and
readings are usable in names.

## Commands

```
seimei search [options] <familyName>      < filter.json
seimei info <familyName> <givenName> <yomi>
seimei filter apply --to <result.tsv>     < filter.json
seimei filter validate                    < filter.json
```

Every command accepts `-h`, `-help` or `--help`. Flags may be written with
one dash or two (`-space full` or `--space full`).

### search

Generates given names for a family name, evaluates them and prints those
that pass the filter read from standard input. Work is spread over several
threads, so rows come out in no fixed order.

```
$ seimei search 山田 < filter.json
評点    画数    名前    読み    性別    天格    地格    人格    外格    総格
...
```

Options:

- `--space common|full`: `common` (the default) draws from the table of
  common given names in `gen/mei.json`; `full` enumerates every combination
  of usable characters for which the family name plus the given name stays
  within 40 strokes, reading each by combining the readings of its
  characters.
- `--min-length N` (default 1) and `--max-length N` (default 3): length of
  the given name in characters; the minimum must be at least 1, neither may
  exceed 4, and the minimum may not exceed the maximum.
- `--yomi-count N` (default 5): with `--space full`, must be at least 1.
- `--dir-dict PATH`: with `--space full`, must name an existing directory.

### info

Scores a single name and prints the header and one TSV row. The reading may
be written in hiragana or katakana; it is shown in katakana.

```
$ seimei info 山田 太郎 たろう
評点    画数    名前    読み    性別    天格    地格    人格    外格    総格
8       13      太郎    タロウ  男性    吉      大吉    大凶    大凶    大吉
```

The 性別 column depends on the name lists in the data directory.

### filter apply

Re-filters a TSV file produced by `search` without generating names again.
The header line and blank lines of the file are skipped.

```
$ seimei filter apply --to result.tsv < stricter.json
```

### filter validate

Reads a filter from standard input and prints it back as indented JSON,
keeping only the keys the filter language knows. Exits with status 1 when
the input is not JSON or a value has the wrong type.

## Filter language

A filter is a JSON object; the first of these keys that is present decides
what it does (in the order `and`, `or`, `not`, `minRank`, `mora`, `strokes`,
`true`, `false`, `yomiCount`, `yomi`, `commonYomi`, `kanjiCount`, `kanji`,
`minTotalRank`, `length`, `sex`):

| filter         | form                                             |
|----------------|--------------------------------------------------|
| true / false   | `{"true": {}}`, `{"false": {}}`                  |
| and / or       | `{"and": [filter, ...]}`, `{"or": [filter, ...]}`|
| not            | `{"not": filter}`                                |
| sex            | `{"sex": "asexual" \| "male" \| "female"}`       |
| length         | `{"length": count}`                              |
| mora           | `{"mora": count}`                                |
| strokes        | `{"strokes": count}`                             |
| minRank        | `{"minRank": 0-4}` (4=大大吉 … 0=大凶)           |
| minTotalRank   | `{"minTotalRank": 0-255}`                        |
| yomiCount      | `{"yomiCount": {"rune": "タ", "count": count}}`  |
| yomi           | `{"yomi": match}`                                |
| kanjiCount     | `{"kanjiCount": {"rune": "太", "count": count}}` |
| kanji          | `{"kanji": match}`                               |
| commonYomi     | `{"commonYomi": {}}`                             |

where `count` is one of `{"lessThan": n}`, `{"equal": n}`,
`{"greaterThan": n}` with `n` from 0 to 255, and `match` is one of
`{"equal": s}`, `{"startWith": s}`, `{"endWith": s}`, `{"contain": s}`.

`minRank` checks 人格, 地格, 外格 and 総格 (天格 depends only on the family
name). `strokes` tests the strokes of the given name alone. `mora` does not
count the small kana ァィゥェォャュョ. `sex: "male"` and `sex: "female"` also
accept readings used for both; `sex: "asexual"` accepts only those.

Example:

```json
{
  "and": [
    {"minRank": 3},
    {"sex": "female"},
    {"mora": {"lessThan": 4}},
    {"commonYomi": {}}
  ]
}
```

## Using it as a library

```python
from seimei.evaluation import evaluate
from seimei.strokes import by_map

strokes = by_map({"山": 3, "田": 5, "太": 4, "郎": 9})
result = evaluate("山田", "太郎", strokes)
print(result.total())  # 8
print(result)          # Result{Tenkaku: 吉, Jinkaku: 大凶, Chikaku: 大吉, ...}
```

Other useful pieces:

- `seimei.kanji.load_strokes()`, `load_yomi()` and `load(strokes, yomi)`
  read the dictionaries from the data directory.
- `seimei.filter_parser.parse()` and `build()` turn filter JSON into a
  predicate over `seimei.filters.Target`; `seimei.filters` holds the
  combinators (`and_`, `or_`, `not_`, `min_rank`, `mora`, …) for building
  filters in code.
- `seimei.gen.common_space_generator()` and `full_space_generator()` yield
  candidate names; `seimei.search.search()` and `parallel()` evaluate and
  filter them.
- `seimei.tsv.parse_tsv()` and `tsv_printer()` read and write result tables.
- `seimei.kanaconv.htok()` converts hiragana to katakana and
  `seimei.mora.count()` counts morae.
- `seimei.dicdir` has helpers that locate a MeCab dictionary directory,
  asking `mecab-config --dicdir` through `by_mecab_config()`.

## What it does not do

- Readings of generated names come only from the per-character readings in
  the dictionary; no morphological analyser is used, so `--yomi-count` and
  `--dir-dict` are checked but do not change the results.
- There is no command that tests a single name against a filter; run
  `seimei info` and `seimei filter apply` on its output instead.
- The dictionaries and name lists are not included (see "Data files").

## Running the tests

```
pip install .[test]
pytest
```