import sys

import termtables

from .constants import LOGS_PATH
from .helpers import create_dirs

BLUE = "\033[94m"
GREEN = "\033[92m"
YELLOW = "\033[93m"
RED = "\033[91m"

BOLD = "\033[1m"

END = "\033[0m"


class Logger:
    def __init__(self, log_file, quiet=False):
        self.log_file = log_file
        # keeps stdout clean when it carries a rendered config
        self.quiet = quiet

    # log to file
    def log(self, text):
        create_dirs(self.log_file)
        with open(self.log_file, mode="a") as logs:
            logs.write(text + "\n")

    # print to std out
    def stdout(self, text):
        if not self.quiet:
            print(text)

    def info(self, text, value=None):
        self._line("🔵 [INFO] ", BLUE, text, value)

    def okay(self, text, value=None):
        self._line("🟢 [OKAY] ", GREEN, text, value)

    def warn(self, text, value=None):
        self._line("🟠 [WARN] ", YELLOW, text, value)

    def error(self, text, value=None):
        self._line("🔴 [ERROR] ", RED, text, value, always=True)

    def _line(self, prefix, color, text, value, always=False):
        log_text = prefix + text
        stdout_text = self.hl(" " + prefix, color) + text

        if value is not None:
            log_text = self.cln(log_text, value)
            stdout_text = self.cln(stdout_text, self.hl(value, BOLD))

        self.log(log_text)
        if self.quiet and always:
            print(stdout_text, file=sys.stderr)
        else:
            self.stdout(stdout_text)

    def report_table(self, table, header, ok_column):
        """
        Print `table` framed by termtables and append the plain version to the log.

        Rows whose `ok_column` cell is falsy are highlighted red, the rest green.
        """
        log_table = termtables.to_string(
            table,
            header=header,
            style=termtables.styles.rounded_double,
        )
        self.log(log_table)

        stdout_table = [self.color_row(row, ok_column) for row in table]
        table_colored_string = termtables.to_string(
            stdout_table,
            header=header,
            style=termtables.styles.rounded_double,
        )

        self.stdout(table_colored_string)

    def color_row(self, row, ok_column):
        hlcolor = GREEN if row[ok_column] else RED
        return [self.hl(cell, hlcolor) for cell in row]

    def hl(self, text, color=BOLD):
        return f"{color}{text}{END}"

    def hlgreen(self, text):
        return self.hl(text, GREEN)

    def hlred(self, text):
        return self.hl(text, RED)

    def cln(self, text1, text2):
        return f"{text1}: {text2}"

    def divider(self):
        self.log(" - +" * 20)
        self.stdout((self.hlred(" -") + self.hlgreen(" +")) * 20)


logger = Logger(LOGS_PATH)
