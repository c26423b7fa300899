# pushswap

Sorts a list of distinct integers using two stacks, `a` and `b`, and a small
instruction set. The `push-swap` command prints the instructions that sort
stack `a` in ascending order, one per line.

## Instructions

| Move  | Effect                                              |
|-------|-----------------------------------------------------|
| `sa`  | swap the first two elements of `a`                  |
| `sb`  | swap the first two elements of `b`                  |
| `ss`  | `sa` and `sb` together                              |
| `pa`  | move the top of `b` onto `a`                        |
| `pb`  | move the top of `a` onto `b`                        |
| `ra`  | rotate `a` up: the first element becomes the last   |
| `rb`  | rotate `b` up                                       |
| `rr`  | `ra` and `rb` together                              |
| `rra` | rotate `a` down: the last element becomes the first |
| `rrb` | rotate `b` down                                     |
| `rrr` | `rra` and `rrb` together                            |

Up to five numbers are sorted with hand-picked sequences (`sort3`, `sort4`,
`sort5`); larger inputs use a binary radix sort over the ranks of the values.

## Installation

```
pip install .
```

## Command line

```
push-swap 3 2 1
```

prints

```
sa
rra
```

The same command can be started with `python -m pushswap.cli`.

Numbers may be given as separate arguments or inside one argument separated by
spaces (`push-swap "4 67 3" 87 23`). Each number may carry a single leading
`+` or `-` and must fit in a 32-bit signed integer. An empty argument, a
non-numeric token, an out-of-range value or a duplicate makes the command
write `Error` to standard error. No arguments, or input that is already
sorted, produce no output. The exit status is 0 in every case.

The command only produces moves; it does not read moves back to check
whether they sort a given list.

## Library use

```python
from pushswap.sorting import solve

moves = solve([3, 2, 1])   # ["sa", "rra"]
```

- `pushswap.parsing`: `parse_int`, `is_valid_token`, `validate_arguments`,
  `parse_arguments` and `assign_ranks`; bad input raises `InputError`
  (a `ValueError`).
- `pushswap.stacks`: `Element` (a number and its rank) and `Stacks`, which
  holds stacks `a` and `b`, exposes every move as a method, records the moves
  that took effect in `moves`, and offers `is_sorted()` and `describe()`.
- `pushswap.sorting`: `compare`, `sort3`, `sort4`, `sort5`, `simple_sort`,
  `radix`, `sort_stack` and `solve`.
- `pushswap.cli`: `run(args, out, err)` and `main(argv=None)`.

The `pushswap.libft` sub-package holds small helpers:

- `chars`: ASCII classification and case conversion (`is_alpha`, `is_digit`,
  `is_alnum`, `is_ascii`, `is_print`, `to_lower`, `to_upper`).
- `strings`: `split`, `strchr`, `strrchr`, `strdup`, `striteri`, `strjoin`,
  `strlcat`, `strlcpy`, `strlen`, `strmapi`, `strncmp`, `strnstr`, `strtrim`,
  `substr`.
- `memory`: byte-buffer operations (`bzero`, `calloc`, `memchr`, `memcmp`,
  `memcpy`, `memmove`, `memset`).
- `numbers`: `atoi`, `itoa` and `sort_int_pass` (one bubble-sort pass).
- `output`: `format_printf`, `printf`, `number_in_base` and the stream
  writers `putchar_fd`, `putstr_fd`, `putendl_fd`, `putnbr_fd`.
- `lists`: `LinkedList`, a singly linked list.
- `lines`: `LineReader`, which reads a text or binary stream line by line
  through a fixed-size buffer.

## Tests

```
pip install .[test]
pytest
```