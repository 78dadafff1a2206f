import sys

from argot import Parser, Option, Outcome

parser = Parser(
    "Sample Application",
    "9.9.9.9",
    "This is a sample application description. The string here will be there "
    "break into multiple lines if they overlap the maximum line width",
)

shown = []


@parser.option("-v", "--version", descr="Shows the application version.", mandatory=False)
def version(option):
    shown.append(option)
    return True


parser.register(Option(
    "--mandatory",
    descr="This a mandatory argument and it expect two following args {arg1} and {arg2}.",
    arguments=[("arg1", "The argument 1."), ("arg2", "The argument 2.")],
))


if __name__ == '__main__':
    if (outcome := parser.parse()) == Outcome.OK:
        print("Parsing OK!")
        print("Argument 1:", parser["--mandatory"].value("arg1"))
        print("Argument 2:", parser["--mandatory"].value("arg2"))

    if shown:
        print("Showing application version:", parser.version)

    sys.exit(outcome)
