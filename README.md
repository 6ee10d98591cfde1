# puzzlekit

A collection of small, self-contained solutions to classic programming puzzles. They cover string manipulation, counting, number-base conversion and subset enumeration. The package has no runtime dependencies.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## What is inside

| Module | Function / class | What it does |
| --- | --- | --- |
| `puzzlekit.roman` | `roman_to_int(s)` | Converts a Roman numeral to an integer |
| `puzzlekit.prefix` | `longest_common_prefix(strs)` | Longest prefix shared by all strings |
| `puzzlekit.lucky` | `find_lucky(arr)` | Largest value whose count equals itself, or `-1` |
| `puzzlekit.nice_substring` | `longest_nice_substring(s)` | Longest substring in which every ASCII letter appears in both cases; the earliest one wins a tie |
| `puzzlekit.sum_pairs` | `FindSumPairs` | Counts pairs that sum to a total while the second list changes |
| `puzzlekit.remove_element` | `remove_element(nums, val)` | Moves kept values to the front in place, fills the rest with zeros and returns how many were kept |
| `puzzlekit.kth_character` | `kth_character(k)` | The k-th character of the growing word "a → ab → abbc …" |
| `puzzlekit.base_convert` | `to_hex(n)`, `to_base36(n)`, `concat_hex36(n)` | Upper-case hexadecimal and base-36 rendering |
| `puzzlekit.coupons` | `validate_coupons(code, business_line, is_active)`, `is_valid_code(code)` | Filters valid, active coupon codes and orders them |
| `puzzlekit.subsets` | `subsets(nums)` | All subsets of a list |
| `puzzlekit.goat_latin` | `to_goat_latin(sentence)` | Translates a sentence to Goat Latin |

## Examples

```python
from puzzlekit.roman import roman_to_int
from puzzlekit.goat_latin import to_goat_latin
from puzzlekit.base_convert import concat_hex36
from puzzlekit.sum_pairs import FindSumPairs

roman_to_int("XII")                     # 12
to_goat_latin("I speak Goat Latin")     # "Imaa peaksmaaa oatGmaaaa atinLmaaaaa"
concat_hex36(13)                        # "A91P1"

pairs = FindSumPairs([1, 1, 2, 2, 2, 3], [1, 4, 5, 2, 5, 4])
pairs.count(7)                          # 8
pairs.add(3, 2)
pairs.count(8)                          # 2
```

`remove_element` changes its list in place:

```python
from puzzlekit.remove_element import remove_element

nums = [0, 1, 2, 2, 3, 0, 4, 2]
kept = remove_element(nums, 2)          # 5
nums                                    # [0, 1, 3, 0, 4, 0, 0, 0]
```

## Behaviour worth knowing

- `FindSumPairs.count(tot)` only looks at values of the first list that are below `tot`.
- `FindSumPairs.add` raises `IndexError` when the index is out of range.
- `kth_character` raises `ValueError` when `k` is less than 1.
- `to_hex`, `to_base36` and `concat_hex36` raise `ValueError` for negative numbers.
- `to_hex(0)` returns `"0"`. `to_base36(0)` returns `""`, because leading zeros are stripped.
- `validate_coupons` accepts only the business lines `electronics`, `grocery`, `pharmacy` and `restaurant`, and returns codes in that group order. Codes are sorted within each group. The three input lists must have the same length.
- `to_goat_latin` raises `ValueError` when the sentence contains an empty word, for example because of a doubled space.

## What it does not do

This is a library of functions only. It provides no command-line program, and it does not read input from files or the terminal.