"""Display formatting shared by the Streamlit components."""

from decimal import Context, Decimal, ROUND_HALF_UP

# Wide enough for any finite float at six decimals
_CONTEXT = Context(prec=400)


def format_number(value, max_decimals=3, grouping=True):
    """
    Number with trailing zeros dropped (1,234.5). Halves round away from
    zero, so 2.5 shows as 3.
    """
    quantum = Decimal(1).scaleb(-max_decimals)
    rounded = Decimal(repr(float(value))).quantize(quantum, rounding=ROUND_HALF_UP, context=_CONTEXT)
    text = f"{rounded:,f}" if grouping else f"{rounded:f}"
    if max_decimals > 0:
        text = text.rstrip('0').rstrip('.')
    if text in ('-0', ''):
        text = '0'
    return text


def format_input(value):
    """Plain decimal text for an editable field; must parse back to `value`."""
    return format_number(value, 6, grouping=False)


def format_currency(value, max_decimals=3):
    """Dollar amount keeping the sign after the symbol, e.g. $-100."""
    return f"${format_number(value, max_decimals)}"


def format_result_amount(value, negative=False):
    """Result-row amount: absolute whole dollars, '-' prefix for cost rows."""
    return f"{'-' if negative else ''}${format_number(abs(value), 0)}"


def format_percent(pct):
    if pct is None:
        return "n/a"
    return f"{pct}%"


def result_row_style(value, negative=False, total=False):
    """Style bucket for a result row: negative, total, positive or muted."""
    if negative:
        return 'negative'
    if value > 0:
        return 'total' if total else 'positive'
    return 'muted'


STYLE_COLORS = {
    'negative': '#fb7185',   # rose
    'total': '#34d399',      # emerald
    'positive': '#10b981',
    'muted': '#64748b',      # slate
}

SEVERITY_COLORS = {
    'danger': ('#4c0519', '#fecdd3'),
    'warning': ('#451a03', '#fde68a'),
    'info': ('#172554', '#bfdbfe'),
}
