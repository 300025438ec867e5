# zhphrase

Building blocks for a Chinese pinyin input method, written in plain Python
with no third-party dependencies.

## What it provides

- **`zhphrase.customphrase`**: a custom phrase dictionary. Each line of its
  text format has the form `key,order=phrase`. A negative order disables the
  phrase. A phrase that begins with `#` is a template with variables such as
  `${year}`, `$month_cn` or `${weekday_cn}`. The module offers
  `CustomPhraseDict` (`load`, `save`, `lookup`, `add_phrase`, `items`,
  `clear`) and `CustomPhrase.evaluate`, along with `builtin_evaluator` and the
  helpers that write numbers in Chinese.
- **`zhphrase.config`**: engine settings as typed values. These include
  `PinyinConfig`, `FuzzyConfig` with its `FuzzyFlag` set, `ShuangpinProfile`
  and `SwitchInputMethodBehavior`.
- **`zhphrase.heuristics`**: small decisions about the input string.
  `english_ness` estimates how much the input looks like English, and
  `is_stroke` checks whether it is stroke input. The module also builds the
  quick-phrase trigger table.
- **`zhphrase.candidates`**: merges extra candidates into the ranked
  candidate list at their requested positions. Extra candidates are custom
  phrases, spelling hints and stroke lookups. See `CandidateMerger` and
  `merge_extra_candidates`.
- **`zhphrase.selection`**: the key logic for picking the 2nd or 3rd
  candidate (`SecondThirdSelector`), and `select_char_from_phrase`.
- **`zhphrase.preedit`**: builds the preedit text shown in the application
  and in the input panel, the string committed for the preedit, and the
  segmentation used when a cloud result is selected.

## Example

```python
import io
from zhphrase.customphrase import CustomPhraseDict, builtin_evaluator

text = "nihao,1=你好\nrq,1=#${year}-${month_mm}-${day_dd}\n"
phrases = CustomPhraseDict()
phrases.load(io.StringIO(text), False)

for phrase in phrases.lookup("rq"):
    print(phrase.evaluate(lambda key: builtin_evaluator(key, None)))

out = io.StringIO()
phrases.save(out)
print(out.getvalue())
```

## Installing and testing

```
pip install .
pip install ".[test]"
pytest
```