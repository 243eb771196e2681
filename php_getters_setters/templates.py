# Marker slots are replaced literally; `%name%` may appear more than once.
# `@param type ` and the `@return ` tag are matched by prefix when spacing is applied.

GETTER_TEMPLATE = """/**
 * %description%
 *
 * @return %type%
 */
public function %getter_name%()
{
    return $this->%name%;
}

"""

SETTER_TEMPLATE = """/**
 * %description%
 *
 * @param type $%name%
 *
 * @return self
 */
public function %setter_name%(%type_hint%$%name%)
{
    $this->%name% = $%name%;

    return $this;
}

"""

TEMPLATES = {
    "getter": GETTER_TEMPLATE,
    "setter": SETTER_TEMPLATE,
}
