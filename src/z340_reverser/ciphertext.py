"""
Transcription of the Z-340 cipher, 20 rows of 17 symbols.

Transcription source: http://zodiackillerciphers.com/wiki/index.php?title=Cipher_comparisons
"""

Z340_ROWS = (
    "HER>pl^VPk|1LTG2d",
    "Np+B(#O%DWY.<*Kf)",
    "By:cM+UZGW()L#zHJ",
    "Spp7^l8*V3pO++RK2",
    "_9M+ztjd|5FP+&4k/",
    "p8R^FlO-*dCkF>2D(",
    "#5+Kq%;2UcXGV.zL|",
    "(G2Jfj#O+_NYz+@L9",
    "d<M+b+ZR2FBcyA64K",  # end of the first block (Z-340-1)
    "-zlUV+^J+Op7<FBy-",
    "U+R/5tE|DYBpbTMKO",
    "2<clRJ|*5T4M.+&BF",
    "z69Sy#+N|5FBc(;8R",
    "lGFN^f524b.cV4t++",
    "yBX1*:49CE>VUZ5-+",
    "|c.3zBK(Op^.fMqG2",
    "RcT+L16C<+FlWB|)L",
    "++)WCzWcPOSHT/()p",  # end of the second block (Z-340-2)
    "|FkdW<7tB_YOB*-Cc",
    ">MDHNpkSzZO8A|K;+",  # end of the third block (Z-340-3)
)

Z340 = "".join(Z340_ROWS)
