"""
LineBASIC test.interpreter
Tests for the statement dispatcher and expression evaluator

(c) 2020--2022 Rob Hagemans, 2026 LineBASIC contributors
This file is released under the GNU GPL version 3 or later.
"""

from linebasic.basic import Session
from linebasic.basic import nodes
from linebasic.basic.interpreter import Interpreter
from linebasic.basic.expressions import Evaluator
from linebasic.basic.program import StatementTable
from linebasic.basic.context import Context, ForLoop
from linebasic.basic.output import Output
from linebasic.basic.base import error
from tests.unit.utils import TestCase, run_tests


class InterpreterTest(TestCase):
    """Unit tests for the interpreter."""

    tag = u'interpreter'

    def test_kinds(self):
        """Every statement and expression kind has a handler."""
        assert Interpreter().kinds() == set(nodes.STATEMENTS)
        assert Evaluator().kinds() == set(nodes.EXPRESSIONS)

    def test_line_order(self):
        """Without jumps, statements run in line order, then unnumbered in source order."""
        assert self.run_program(
            'PRINT "x"\n30 PRINT 3\n10 PRINT 1\nPRINT "y"\n20 PRINT 2\n'
        ) == ['1\n', '2\n', '3\n', 'x\n', 'y\n']

    def test_print(self):
        """PRINT is newline terminated."""
        assert self.run_program('PRINT "X"') == ['X\n']
        assert self.run_program('PRINT') == ['\n']

    def test_print_semicolon(self):
        """Trailing semicolon suppresses the newline."""
        assert self.run_program('PRINT "X";') == ['X']
        assert self.run_program('PRINT 1; 2') == ['12\n']

    def test_print_comma(self):
        """Comma separates with a tab; a trailing comma still ends the line."""
        assert self.run_program('PRINT 1,2') == ['1\t2\n']
        assert self.run_program('PRINT 1,') == ['1\n']
        assert self.run_program('10 PRINT 1,\n20 PRINT 2') == ['1\n', '2\n']

    def test_arithmetic(self):
        """LET and arithmetic."""
        assert self.run_program(
            'LET A = 5\nLET B = 3\nPRINT A + B\nPRINT A * B'
        ) == ['8\n', '15\n']
        assert self.run_program('PRINT 7 / 2, 2 ^ 3 ^ 2, -2 ^ 2') == ['3.5\t512\t-4\n']

    def test_string_concatenation(self):
        """Plus concatenates if either side is a string."""
        assert self.run_program('A$ = "N="\nPRINT A$ + 1.5') == ['N=1.5\n']
        assert self.run_program('PRINT "3" + 4, "3" * 4') == ['34\t12\n']

    def test_defaults(self):
        """Unassigned variables are zero or empty."""
        assert self.run_program('PRINT A; "|"; A$; "|"') == ['0||\n']

    def test_comparison_and_logic(self):
        """Comparisons and logical operators yield 1 or 0."""
        assert self.run_program(
            'PRINT 1 < 2; 2 < 1; "A" = "A"; 1 AND 0; 1 OR 0; NOT 0; NOT "x"'
        ) == ['1010110\n']

    def test_goto(self):
        """GOTO skips statements."""
        assert self.run_program(
            '10 PRINT 1\n20 GOTO 40\n30 PRINT 3\n40 PRINT 4'
        ) == ['1\n', '4\n']

    def test_goto_undefined(self):
        """GOTO a missing line is an error."""
        assert self.run_program('10 PRINT 1\n20 GOTO 99\n30 PRINT 3') == [
            '1\n', 'Runtime Error: Undefined line number: 99 in 20\n'
        ]

    def test_if(self):
        """IF THEN ELSE with statements and line numbers."""
        assert self.run_program(
            '10 A = 1\n20 IF A THEN PRINT "yes" ELSE PRINT "no"\n'
            '30 IF A - 1 THEN PRINT "yes" ELSE PRINT "no"\n'
            '40 IF "" THEN PRINT "empty"\n'
            '50 IF A = 1 THEN 70\n60 PRINT "skipped"\n70 PRINT "done"'
        ) == ['yes\n', 'no\n', 'done\n']

    def test_for_next(self):
        """FOR loop runs its body for each value."""
        assert self.run_program(
            '10 FOR I = 1 TO 3\n20 PRINT I;\n30 NEXT I\n40 PRINT\n50 PRINT I'
        ) == ['1', '2', '3', '\n', '4\n']

    def test_for_step(self):
        """FOR with negative and fractional step."""
        assert self.run_program(
            'FOR I = 3 TO 1 STEP -1\nPRINT I;\nNEXT\nFOR J = 0 TO 1 STEP 0.5\nPRINT J;\nNEXT J'
        ) == ['3', '2', '1', '0', '0.5', '1']

    def test_for_body_runs_once(self):
        """The body runs once even if the start is past the end."""
        assert self.run_program('FOR I = 5 TO 1\nPRINT I\nNEXT I') == ['5\n']

    def test_nested_loops(self):
        """Nested loops with a NEXT for two variables."""
        assert self.run_program(
            '10 FOR I = 1 TO 2\n20 FOR J = 1 TO 2\n30 PRINT I * 10 + J;\n40 NEXT J, I'
        ) == ['11', '12', '21', '22']

    def test_bare_next(self):
        """NEXT without a variable closes the most recent loop."""
        assert self.run_program(
            '10 FOR I = 1 TO 2\n20 FOR J = 1 TO 2\n30 PRINT I; J; " ";\n40 NEXT\n50 NEXT'
        ) == ['11 ', '12 ', '21 ', '22 ']

    def test_next_without_for(self):
        """NEXT without FOR stops the program, keeping earlier output."""
        assert self.run_program('10 PRINT "A"\n20 NEXT I\n30 PRINT "B"') == [
            'A\n', 'Runtime Error: NEXT without FOR: I in 20\n'
        ]
        assert self.run_program('NEXT') == ['Runtime Error: NEXT without FOR\n']

    def test_next_after_close(self):
        """A closed loop can't be continued."""
        output = self.run_program('10 FOR I = 1 TO 1\n20 NEXT I\n30 NEXT I')
        assert output == ['Runtime Error: NEXT without FOR: I in 30\n']

    def test_for_type_mismatch(self):
        """FOR bounds must be numbers."""
        assert self.run_program('10 FOR I = 1 TO "A"\n20 NEXT') == [
            'Runtime Error: Type mismatch: FOR loop bounds must be numbers in 10\n'
        ]

    def test_loop_variable_reopened(self):
        """Reopening a loop on the same variable replaces it."""
        assert self.run_program(
            '10 FOR I = 1 TO 2\n20 FOR I = 5 TO 6\n30 PRINT I;\n40 NEXT I\n50 NEXT I'
        ) == ['5', '6', 'Runtime Error: NEXT without FOR: I in 50\n']

    def test_read_data(self):
        """READ takes DATA values by their own kind."""
        assert self.run_program(
            '10 DATA 42, "Hello"\n20 READ A, B$\n30 PRINT A\n40 PRINT B$'
        ) == ['42\n', 'Hello\n']

    def test_read_string_into_numeric_name(self):
        """The DATA value kind wins over the variable name."""
        assert self.run_program('10 DATA "x"\n20 READ A\n30 PRINT A + 1') == ['x1\n']

    def test_data_anywhere(self):
        """DATA is collected before the run, in line order."""
        assert self.run_program(
            '10 READ A, B, C\n20 PRINT A; B; C\n30 DATA 1\n5 DATA -2\n40 END\n50 DATA 3'
        ) == ['-213\n']

    def test_out_of_data(self):
        """Reading past the pool is an error."""
        assert self.run_program('10 DATA 1\n20 READ A, B\n30 PRINT A') == [
            'Runtime Error: Out of DATA in 20\n'
        ]

    def test_restore(self):
        """RESTORE resets the pointer, optionally to a line."""
        assert self.run_program(
            '10 DATA 1, 2\n20 DATA 3\n30 READ A, B, C\n40 RESTORE\n50 READ D\n'
            '60 RESTORE 20\n70 READ E\n80 PRINT A; B; C; D; E'
        ) == ['12313\n']

    def test_restore_past_data(self):
        """RESTORE to a line after all DATA positions at the end."""
        assert self.run_program('10 DATA 1\n20 RESTORE 50\n30 READ A') == [
            'Runtime Error: Out of DATA in 30\n'
        ]

    def test_arrays(self):
        """DIM, assign and read array elements."""
        assert self.run_program(
            '10 DIM A(3)\n20 A(1) = 10\n30 A(2) = 20\n40 PRINT A(1)\n50 PRINT A(2)\n60 PRINT A(0)'
        ) == ['10\n', '20\n', '0\n']

    def test_array_multi(self):
        """Two-dimensional arrays, string values, truncated indices."""
        assert self.run_program(
            '10 DIM B(2, 2)\n20 B(1, 2) = "x"\n30 B(2.9, 0.5) = 7\n40 PRINT B(1, 2); B[2, 0]'
        ) == ['x7\n']

    def test_array_out_of_range(self):
        """Out-of-range access is lenient."""
        assert self.run_program(
            '10 DIM A(2)\n20 A(5) = 1\n30 A(-1) = 1\n40 PRINT A(5); A(-1); A(1, 1)'
        ) == ['000\n']

    def test_undefined_array(self):
        """Use of an undeclared array is an error."""
        assert self.run_program('10 PRINT A(1)') == [
            'Runtime Error: Undefined array: A in 10\n'
        ]
        assert self.run_program('10 B(1) = 2') == [
            'Runtime Error: Undefined array: B in 10\n'
        ]

    def test_array_index_type(self):
        """Array indices must be numbers."""
        assert self.run_program('10 DIM A(2)\n20 PRINT A("1")') == [
            'Runtime Error: Type mismatch: array indices must be numbers in 20\n'
        ]

    def test_dim_errors(self):
        """Array dimensions must be non-negative numbers."""
        assert self.run_program('10 DIM A("3")') == [
            'Runtime Error: Type mismatch: array dimensions must be numbers in 10\n'
        ]
        assert self.run_program('10 DIM A(-1)') == [
            'Runtime Error: Illegal function call: negative array dimension in 10\n'
        ]

    def test_redim(self):
        """A second DIM gives a fresh array."""
        assert self.run_program(
            '10 DIM A(2)\n20 A(1) = 5\n30 DIM A(2)\n40 PRINT A(1)'
        ) == ['0\n']

    def test_end(self):
        """END stops the program."""
        assert self.run_program('10 PRINT 1\n20 END\n30 PRINT 2') == ['1\n']

    def test_rem(self):
        """REM has no effect."""
        assert self.run_program('10 REM PRINT 1\n20 PRINT 2') == ['2\n']

    def test_division_by_zero(self):
        """Division by zero stops the program with a diagnostic."""
        assert self.run_program('10 PRINT 1\n20 PRINT 1/0\n30 PRINT 3') == [
            '1\n', 'Runtime Error: Division by zero in 20\n'
        ]

    def test_error_without_line(self):
        """A diagnostic for an unnumbered statement has no line."""
        assert self.run_program('PRINT 1/0') == ['Runtime Error: Division by zero\n']

    def test_error_in_if_branch(self):
        """An error in a nested statement reports the line of the IF."""
        assert self.run_program('10 IF 1 THEN PRINT 1/0') == [
            'Runtime Error: Division by zero in 10\n'
        ]

    def test_idempotent(self):
        """Interpreting the same program twice gives the same output."""
        with Session() as s:
            program = s.parse('10 DATA 1\n20 READ A\n30 B = B + A\n40 PRINT A; B\n50 DIM C(1)')
            first = s.interpret(program)
            second = s.interpret(program)
        assert first == second == ['11\n']

    def test_jump(self):
        """The jump primitive sets the next statement only."""
        table = StatementTable([nodes.End(line=10), nodes.End(line=20)])
        context = Context(table, Output())
        context.pc = 1
        context.jump(0)
        assert (context.pc, context.next_pc) == (1, 0)

    def test_loop_bookkeeping(self):
        """Open loops are found by name or by recency."""
        context = Context(StatementTable([]), Output())
        first, second = ForLoop('I', 1., 3., 1., 0), ForLoop('J', 1., 3., 1., 1)
        context.open_loop(first)
        context.open_loop(second)
        assert context.get_loop() is second
        assert context.get_loop('I') is first
        context.close_loop(second)
        assert context.get_loop() is first
        with self.assertRaises(error.RunError):
            context.get_loop('J')

    def test_echo(self):
        """Output entries are echoed as they are produced."""
        echoed = []
        output = Output([echoed.append])
        Interpreter().interpret(Session().parse('PRINT 1\nPRINT 1/0'), output)
        assert echoed == output.lines == ['1\n', 'Runtime Error: Division by zero\n']

    def test_unknown_statement(self):
        """A statement kind without handler is an internal error."""
        with self.assertRaises(error.RunError) as cm:
            Interpreter().execute(('bogus',), None)
        assert cm.exception.err == error.INTERNAL_ERROR


if __name__ == '__main__':
    run_tests()
