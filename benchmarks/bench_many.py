from pycombinate.Char import digits, string
from pycombinate.Combinators import sep_by
from pycombinate.Prim import many, run_parser


class TimeMany:
    def setup(self):
        self.parser = many(string("a"))
        self.small = "a" * 1000
        self.medium = "a" * 10000
        self.large = "a" * 100000

    def time_many_small(self):
        run_parser(self.parser, self.small)

    def time_many_medium(self):
        run_parser(self.parser, self.medium)

    def time_many_large(self):
        run_parser(self.parser, self.large)


class TimeSepBy:
    def setup(self):
        self.parser = sep_by(string(","))(digits())
        self.line = ",".join(str(n) for n in range(20000))

    def time_sep_by_digits(self):
        run_parser(self.parser, self.line)
