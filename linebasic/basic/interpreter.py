"""
LineBASIC - interpreter.py
BASIC interpreter: run loop and statement dispatcher

(c) 2013--2022 Rob Hagemans, 2026 LineBASIC contributors
This file is released under the GNU GPL version 3 or later.
"""

import logging

from .base import error
from . import nodes
from . import values
from . import expressions
from . import program
from . import context
from . import output


class Interpreter(object):
    """BASIC interpreter."""

    def __init__(self):
        """Initialise interpreter."""
        self.evaluator = expressions.Evaluator()
        self._callbacks = {
            nodes.Print: self._exec_print,
            nodes.Let: self._exec_let,
            nodes.Goto: self._exec_goto,
            nodes.If: self._exec_if,
            nodes.For: self._exec_for,
            nodes.Next: self._exec_next,
            nodes.Data: self._exec_nothing,
            nodes.Read: self._exec_read,
            nodes.Restore: self._exec_restore,
            nodes.Dim: self._exec_dim,
            nodes.End: self._exec_end,
            nodes.Rem: self._exec_nothing,
        }

    def kinds(self):
        """Statement kinds handled by this interpreter."""
        return set(self._callbacks)

    def interpret(self, parsed, sink=None):
        """Run a parsed program in a fresh context; return the output entries."""
        if sink is None:
            sink = output.Output()
        table = program.StatementTable(parsed.statements)
        self.run(context.Context(table, sink))
        return sink.lines

    def run(self, ctx):
        """Execute statements until the end of the table, END or a runtime error."""
        ctx.running = True
        try:
            while ctx.running and ctx.pc < len(ctx.table):
                ctx.next_pc = ctx.pc + 1
                self.execute(ctx.table[ctx.pc], ctx)
                ctx.pc = ctx.next_pc
        except error.RunError as e:
            if e.line is None:
                e.line = ctx.table[ctx.pc].line
            logging.debug('Run stopped at statement %d: %r', ctx.pc, e)
            ctx.output.write(e.get_message())
        finally:
            ctx.running = False

    def execute(self, statement, ctx):
        """Perform the effect of one statement."""
        try:
            callback = self._callbacks[type(statement)]
        except KeyError:
            raise error.RunError(error.INTERNAL_ERROR, detail=type(statement).__name__)
        callback(statement, ctx)

    def assign(self, variable, value, ctx):
        """Assign a value to a scalar or array element."""
        if not variable.indices:
            ctx.scalars.set(variable.name, value)
            return
        ctx.arrays.check_dim(variable.name)
        index = self.evaluator.evaluate_indices(variable.indices, ctx)
        ctx.arrays.set(variable.name, index, value)

    ###########################################################################
    # statements

    def _exec_nothing(self, statement, ctx):
        """REM and DATA: no effect at run time."""

    def _exec_print(self, statement, ctx):
        """PRINT: render expressions as a single output entry."""
        parts = []
        for i, expr in enumerate(statement.expressions):
            if i and statement.separators[i-1] == ',':
                parts.append('\t')
            parts.append(values.to_str(self.evaluator.evaluate(expr, ctx)))
        # only a trailing semicolon suppresses the newline
        if statement.trailing != ';':
            parts.append('\n')
        ctx.output.write(''.join(parts))

    def _exec_let(self, statement, ctx):
        """LET: evaluate, then assign."""
        value = self.evaluator.evaluate(statement.expression, ctx)
        self.assign(statement.variable, value, ctx)

    def _exec_goto(self, statement, ctx):
        """GOTO: jump to a line number."""
        ctx.jump(ctx.table.find_line(statement.target))

    def _exec_if(self, statement, ctx):
        """IF: execute one of the branches."""
        if values.is_true(self.evaluator.evaluate(statement.condition, ctx)):
            self.execute(statement.then_branch, ctx)
        elif statement.else_branch is not None:
            self.execute(statement.else_branch, ctx)

    def _exec_for(self, statement, ctx):
        """FOR: open a loop and initialise the loop variable."""
        detail = 'FOR loop bounds must be numbers'
        start = values.pass_number(self.evaluator.evaluate(statement.start, ctx), detail=detail)
        stop = values.pass_number(self.evaluator.evaluate(statement.stop, ctx), detail=detail)
        step = values.Number(1)
        if statement.step is not None:
            step = values.pass_number(self.evaluator.evaluate(statement.step, ctx), detail=detail)
        ctx.open_loop(context.ForLoop(
            statement.variable, start.value, stop.value, step.value, ctx.pc
        ))
        ctx.scalars.set(statement.variable, start)

    def _exec_next(self, statement, ctx):
        """NEXT: iterate the named loops, or the most recent one."""
        for name in statement.variables or (None,):
            loop = ctx.get_loop(name)
            more = loop.iterate()
            ctx.scalars.set(loop.variable, values.Number(loop.current))
            if more:
                ctx.jump(loop.for_index + 1)
                return
            ctx.close_loop(loop)

    def _exec_read(self, statement, ctx):
        """READ: assign DATA pool entries in order."""
        for variable in statement.variables:
            self.assign(variable, values.from_data(ctx.read_data()), ctx)

    def _exec_restore(self, statement, ctx):
        """RESTORE: reset the DATA pointer."""
        if statement.target is None:
            ctx.data_pos = 0
        else:
            ctx.data_pos = ctx.table.data_position(statement.target)

    def _exec_dim(self, statement, ctx):
        """DIM: allocate arrays."""
        for array in statement.arrays:
            dimensions = [
                values.to_index(self.evaluator.evaluate(_expr, ctx), 'array dimensions must be numbers')
                for _expr in array.dimensions
            ]
            ctx.arrays.dim(array.name, dimensions)

    def _exec_end(self, statement, ctx):
        """END: stop the program."""
        ctx.running = False
