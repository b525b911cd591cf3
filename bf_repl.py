import readline

import brainfuck

PROMPT = ''


def bf_repl(read=input):
    print('Type "BYE" or input an end of file (Ctrl+D) to quit.')

    m = brainfuck.Machine(channel=brainfuck.BufferChannel())

    cmd = read(PROMPT)
    while cmd.upper() != 'BYE':
        print(m.eval(cmd))
        cmd = read(PROMPT)


if __name__ == '__main__':
    try:
        bf_repl()
    except EOFError:
        pass  # perfectly acceptable
