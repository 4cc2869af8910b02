"""Help text for the dice command."""

DESCRIPTION = "Roll dice using a small expression language."

EXPRESSION_HELP = """\
The simplest expression is just a number, meaning one die with that many
sides: `dice 20` or `dice d20` rolls a twenty sided die.

Prefix the die with a count to roll several: three six sided dice is `3d6`.

Keep or drop dice after rolling:

  d N   drop the lowest N       4d6d1   roll 4d6, drop the lowest die
  D N   drop the highest N      2d20D1  roll 2d20, drop the higher die
  k N   keep the highest N      4d6k3   roll 4d6, keep the highest three
  K N   keep the lowest N       2d20K1  roll 2d20, keep the lower die

Lowercase letters favour high results, uppercase favour low ones.

Add or subtract a constant with `+` or `-`: `4d6+1`, `3d6-2`, `2d20K1+7`.

Several expressions can be rolled at once:

  dice 4d6d1 4d6d1 4d6d1 4d6d1 4d6d1 4d6d1

In summary:

  3d6      3 x d6
  4d6d1    3 x d6 dropping lowest
  20+1     1 x d20 and add one to the result
  2d8K1-1  2 x d8 keep the lower and subtract 1

Run without any expressions to enter interactive mode.
"""
