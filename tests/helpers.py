# 初期値大阪市 escaped in Shift_JIS, with the trail byte of 値 written literally.
SHIFT_JIS_ESCAPED = '%8F%89%8A%FA%92l%91%E5%8D%E3%8Es'
SHIFT_JIS_RAW = bytes([
    0xe5, 0x88, 0x9d, 0xe6, 0x9c, 0x9f, 0xe5, 0x80, 0xa4,
    0xe5, 0xa4, 0xa7, 0xe9, 0x98, 0xaa, 0xe5, 0xb8, 0x82,
]).decode('utf8')

CHARSETS = ['UTF-8', 'Shift_JIS', 'US-ASCII', 'CP1252']
