from pycombinate import between, choice, digits, lazy, sep_by, string, eof, sequence_of

# [1,[2,[3],4],5] -> [1, [2, [3], 4], 5]
between_square_brackets = between(string("["), string("]"))
comma_separated = sep_by(string(","))

value = lazy(lambda: choice([
    digits().map(int),
    array_parser,
]))

array_parser = between_square_brackets(comma_separated(value))

document = sequence_of([array_parser, eof()]).map(lambda results: results[0])

if __name__ == "__main__":
    import sys

    text = sys.argv[1] if len(sys.argv) > 1 else "[1,[2,[3],4],5]"
    state = document.run(text)
    if state.is_error:
        print("Parsing Failed:", state.error)
    else:
        print("Successfully Parsed:", state.result)
