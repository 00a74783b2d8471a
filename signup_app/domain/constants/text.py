"""Character sets shared by normalization and the field rules"""

# Whitespace as browser regex engines define \s (and String.prototype.trim strips)
WHITESPACE = (
    "\t\n\v\f\r \u00a0\u1680"
    + "".join(chr(code) for code in range(0x2000, 0x200B))
    + "\u2028\u2029\u202f\u205f\u3000\ufeff"
)
