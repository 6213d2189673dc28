# phpfuncs

Familiar PHP built-in functions, available as plain Python functions.

The package is split by topic:

- `phpfuncs.strings`: `addslashes`, `addcslashes`, `chunk_split`, `number_format`,
  `str_pad` (with the `PadType` enum), `strrev`, `substr`, `mb_substr`,
  `strlen`, `mb_strlen`, `strip_tags`, `htmlspecialchars`, `ucfirst`,
  `ucwords`, `strpos`, `stripos`, `strrpos`, `explode`, `implode` and more.
- `phpfuncs.variables`: `boolval`, `empty`, `intval`, `strval`, `gettype`,
  `is_bool`, `is_numeric`.
- `phpfuncs.arrays`: `array`, `count`, `array_change_key_case` (with the
  `KeyCase` enum), `array_chunk`, `array_column`, `array_count_values`,
  `array_fill`, `array_fill_keys`, `array_flip`, `array_intersect`,
  `array_keys`, `array_merge`, `array_push`, `array_reverse`.
- `phpfuncs.numeric`: math helpers such as `base_convert`, `decbin`, `dechex`,
  `decoct`, `rand`, `round_`, `is_nan`, `is_finite`, and trigonometric and
  logarithmic functions.
- `phpfuncs.hashing`: `md5`, `sha1`, their `_file` variants, `base64_encode`,
  `base64_decode`, `random_bytes`, `json_encode`, `json_decode`.
- `phpfuncs.urls`: `parse_url`, `parse_str`, `urlencode`, `rawurlencode` and
  their decoders `urldecode`, `rawurldecode`.
- `phpfuncs.dates`: `date` with PHP format letters, `date_add`, `checkdate`,
  `time_`, `sleep`, `usleep`.
- `phpfuncs.files`: `file_get_contents`, `file_put_contents`, `basename`,
  `is_file`, `is_dir`, `scandir`, `copy`, `unlink`, `rmdir` and other
  filesystem helpers.
- `phpfuncs.output`: `echo` and `print_r` (standard output), `print_`
  (standard error), `exec_`, `exit_`, `die`.

Names that would clash with Python built-ins carry a trailing underscore
(`chr_`, `ord_`, `abs_`, `max_`, `min_`, `pow_`, `print_`, `exit_`, ...).

## Installation

```
pip install .
```

## Usage

```python
from phpfuncs.strings import strrev, str_pad, number_format
from phpfuncs.variables import intval, is_numeric

strrev("Hello, 世界")                    # '界世 ,olleH'
str_pad("5", 3, "0")                    # '500'
number_format(1234567.891, 2, ".", ",")  # '1,234,567.89'
intval("-123abc")                        # -123
is_numeric("-123.45")                    # True
```

Malformed input raises a Python exception, for example `ValueError` from
`intval`, `base_convert`, `base64_decode` or `urldecode`; filesystem
functions raise `OSError`. A few functions return a neutral value instead,
as documented on each: `bin2hex` and `hex2bin` give `""`, `md5_file` and
`sha1_file` give `""` for an unreadable file, and `filemtime` gives `None`.

## Demo

A short demonstration of several functions is available as a command:

```
phpfuncs-demo
```

It prints a greeting, writes one line to standard error and then prints the
results of a number of string, array and variable helpers.

## What it does not do

This is a library of individual functions. It does not run PHP code, and
`date` understands only the format letters listed in `phpfuncs.dates`; other
characters are copied unchanged.

## Running the tests

```
pip install .[test]
pytest
```