import pytest
import brainfuck


class TestTheParser():
    def test_empty_string(self):
        """ Parser refuses to parse past the end of the string. """
        p = brainfuck.Parser('')

        with pytest.raises(StopIteration):
            p.parse_comment()

        with pytest.raises(StopIteration):
            p.parse_instruction()

        with pytest.raises(StopIteration):
            p.next_instruction()

        assert list(p.generate()) == []

    def test_all_commentary(self):
        """ Parser consumes a whole run of commentary in one gulp. """
        comment = "Hello world? \n\t Nope"
        p = brainfuck.Parser(comment)

        assert p.parse_comment() == comment

        with pytest.raises(StopIteration):
            p.next_instruction()

        # Also, next_instruction will happily consume and ignore it by itself.
        p = brainfuck.Parser(comment)

        with pytest.raises(StopIteration):
            p.next_instruction()

    def test_single_instruction(self):
        """ A single instruction is returned immediately. """
        p = brainfuck.Parser("+")

        assert p.next_instruction() == brainfuck.INCREMENT

        with pytest.raises(StopIteration):
            p.next_instruction()

    def test_leading_commentary(self):
        """ Leading commentary is ignored. """
        p = brainfuck.Parser("  add one: +")

        assert p.next_instruction() == brainfuck.INCREMENT
        assert p.is_finished

    def test_no_comment_at_instruction(self):
        """ parse_comment doesn't eat instructions. """
        p = brainfuck.Parser("+ ")

        assert p.parse_comment() is None
        assert p.pos == 0
        assert p.parse_instruction() == brainfuck.INCREMENT
        assert p.parse_instruction() is None

    def test_every_instruction(self):
        """ All eight symbols map to their own instruction, in order. """
        p = brainfuck.Parser("><+-.,[]")

        assert list(p.generate()) == [brainfuck.MOVE_RIGHT,
                                      brainfuck.MOVE_LEFT,
                                      brainfuck.INCREMENT,
                                      brainfuck.DECREMENT,
                                      brainfuck.OUTPUT,
                                      brainfuck.INPUT,
                                      brainfuck.LOOP_OPEN,
                                      brainfuck.LOOP_CLOSE]

    def test_commentary_between(self):
        """ Commentary and newlines between instructions vanish. """
        p = brainfuck.Parser("+ plus\n- minus\n\n[loop]  trailing words")

        assert p.next_instruction() == brainfuck.INCREMENT
        assert p.next_instruction() == brainfuck.DECREMENT
        assert p.next_instruction() == brainfuck.LOOP_OPEN
        assert p.next_instruction() == brainfuck.LOOP_CLOSE

        with pytest.raises(StopIteration):
            p.next_instruction()

    def test_bytes(self):
        """ Raw bytes are accepted, whatever they decode to. """
        p = brainfuck.Parser(b"\xff+\x00-\x80")

        assert list(p.generate()) == [brainfuck.INCREMENT, brainfuck.DECREMENT]


class TestTokenize():
    def test_only_commentary(self):
        assert brainfuck.tokenize('') == []
        assert brainfuck.tokenize('this has no instructions at all\n') == []

    def test_unbalanced_is_fine(self):
        """ Tokenizing never fails; bracket matching is someone else's job. """
        assert brainfuck.tokenize('] [[') == [brainfuck.LOOP_CLOSE,
                                               brainfuck.LOOP_OPEN,
                                               brainfuck.LOOP_OPEN]

    def test_strip_comments(self):
        assert brainfuck.strip_comments('a+b-c\n[d>e<f]g.h,i') == '+-[><].,'

    def test_strip_then_tokenize(self):
        """ Tokenizing stripped source gives the same tape as the original. """
        for source in ['', 'nothing', brainfuck.HELLO_WORLD,
                       'cat: ,[.,]  (echo until EOF)',
                       '+++ three\n[ - loop ]\n. done']:
            stripped = brainfuck.strip_comments(source)

            assert brainfuck.tokenize(stripped) == brainfuck.tokenize(source)
            assert brainfuck.strip_comments(stripped) == stripped

    def test_to_source(self):
        instructions = brainfuck.tokenize('[->+<]')

        assert brainfuck.to_source(instructions) == '[->+<]'
