class FigPlotError(Exception):

    def __init__(self, msg):
        super().__init__(msg)
        self.msg = msg

    def __str__(self):
        return self.msg


class WrongUsage(FigPlotError):

    pass


class InvalidParameterName(WrongUsage, KeyError):

    pass


class InvalidArgument(WrongUsage, ValueError):

    pass


class IOFailure(FigPlotError):

    pass
