from pycombinate import sequence_of, letters, digits, string, fail

# 1. Payload parsers, one per label
string_parser = letters().map(lambda result: {"type": "string", "value": result})

number_parser = digits().map(lambda result: {"type": "number", "value": int(result)})

diceroll_parser = sequence_of([digits(), string("d"), digits()]).map(
    lambda results: {"type": "diceroll", "value": [int(results[0]), int(results[2])]}
)

payloads = {
    "string": string_parser,
    "number": number_parser,
    "diceroll": diceroll_parser,
}


# 2. The label decides how the payload is parsed
def payload_for(label):
    return payloads.get(label, fail(f"unknown label {label!r}"))


parser = (
    sequence_of([letters(), string(":")])
    .map(lambda results: results[0])
    .chain(payload_for)
)

if __name__ == "__main__":
    for text in ["string:hello", "number:42", "diceroll:2d8", "colour:red"]:
        state = parser.run(text)
        if state.is_error:
            print(f"{text}: {state.error}")
        else:
            print(f"{text}: {state.result}")
