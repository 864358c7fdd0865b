import unittest

from brainf import COMPLETION_MARKER, BrainfInterpreter, ExecutionState, IOMode
from brainf.errors import StepLimitExceeded
from brainf.visualizer import _format_code_window, format_state, trace


class BrainfInterpreterStepTests(unittest.TestCase):
    def test_step_sequence_produces_states(self) -> None:
        interpreter = BrainfInterpreter()
        program = "+++."
        states = list(interpreter.step(program, IOMode.NUMERIC, tape_window=2))
        commands = [state.command for state in states[:-1]]  # final state has command=None
        self.assertEqual(commands, ["+", "+", "+", "."])
        self.assertEqual(states[-2].output, "3, ")
        self.assertEqual(states[-1].output, "3, " + COMPLETION_MARKER)
        self.assertEqual(states[-1].pc, len(program))
        self.assertEqual(states[-1].step, 4)

    def test_step_limit(self) -> None:
        interpreter = BrainfInterpreter()
        stepper = interpreter.step("+[]", max_steps=4)
        with self.assertRaises(StepLimitExceeded):
            while True:
                next(stepper)

    def test_snapshot_tape_window(self) -> None:
        interpreter = BrainfInterpreter(tape_capacity=10)
        states = list(interpreter.step(">>>>+", tape_window=1))
        last = states[-1]
        self.assertEqual(last.pointer, 4)
        self.assertEqual(last.tape_start, 3)
        self.assertEqual(last.tape, [0, 1, 0])


class FormatStateTests(unittest.TestCase):
    def test_format_state_marks_pointer_and_pc(self) -> None:
        state = ExecutionState(
            step=3,
            pc=2,
            command="+",
            pointer=1,
            tape_start=0,
            tape=[1, 2, 0],
            output="hi",
            code_length=4,
        )
        text = format_state(state, "++>+")
        lines = text.splitlines()
        self.assertEqual(lines[0], "step=3 pc=2/4 command='+' pointer=1")
        self.assertEqual(lines[1], "output='hi'")
        self.assertEqual(lines[2], "tape= 0:001  [1:002]  2:000 ")
        self.assertEqual(lines[3], "code=++[>]+")

    def test_format_state_final(self) -> None:
        state = ExecutionState(
            step=1,
            pc=1,
            command=None,
            pointer=0,
            tape_start=0,
            tape=[-4],
            output="",
            code_length=1,
        )
        text = format_state(state, "-")
        self.assertIn("command='(end)'", text)
        self.assertIn("[0:-04]", text)
        self.assertNotIn("output=", text)

    def test_code_window(self) -> None:
        self.assertEqual(_format_code_window("", 0), "(empty)")
        self.assertEqual(_format_code_window("+-", 2), "+-[END]")
        self.assertEqual(_format_code_window("+" * 40, 20, window=2), "++[+]++")


class TraceTests(unittest.TestCase):
    def test_trace_emits_every_state(self) -> None:
        lines = []
        states = list(trace(",.", IOMode.CHARACTER, "Z", emit=lines.append))
        self.assertEqual(len(states), 3)
        self.assertEqual(lines.count("-" * 40), 3)
        self.assertIn("command='.'", lines[3])
        self.assertEqual(states[-1].output, "Z" + COMPLETION_MARKER)

    def test_trace_uses_given_interpreter(self) -> None:
        interpreter = BrainfInterpreter()
        list(trace("+++", interpreter=interpreter, emit=lambda _: None))
        self.assertEqual(interpreter.tape.read(), 3)


if __name__ == "__main__":
    unittest.main()
