"""Input and reference data for the vector-vector add benchmark."""

from __future__ import annotations

from dataclasses import dataclass

DATA_SIZE = 300

_INPUT1_TEXT = """
41 833 564 187 749 350 132 949 584 805 621 6 931 890 392 694 961 110 116 296 426 314 659 774 319 678 875 376 474 938 539 569 203 280 759 606 511 657 195 81
267 229 337 944 902 241 913 826 933 985 195 960 566 350 649 657 181 111 859 65 288 349 141 905 886 264 576 979 761 241 478 499 403 222 444 721 676 317 224 937
288 119 615 606 389 351 455 278 367 358 584 62 985 403 346 517 559 908 775 255 778 598 143 33 125 941 933 799 553 431 648 952 287 19 49 86 95 441 587 614
382 280 808 971 819 344 450 512 965 347 808 882 537 946 701 356 567 891 22 568 665 423 434 158 2 84 247 49 435 792 869 486 414 369 548 518 888 682 284 264
499 290 897 215 731 688 251 786 555 302 528 544 322 947 287 824 304 788 733 959 366 722 294 975 653 748 91 378 105 102 381 651 825 840 356 148 54 140 955 343
533 757 521 837 592 13 173 63 121 133 758 372 951 39 129 110 847 437 255 269 409 628 399 549 753 564 171 19 727 501 777 43 753 81 202 853 153 760 357 943
922 328 496 442 516 641 276 786 113 842 907 275 237 32 784 565 357 803 819 751 280 85 458 454 710 459 41 253 377 508 700 860 480 741 499 709 49 371 873 945
992 526 721 435 232 497 697 30 348 250 350 250 573 784 749 502 823 826 170 160
"""

_INPUT2_TEXT = """
454 335 1 989 365 572 64 153 216 140 210 572 339 593 898 228 12 883 750 646 500 436 701 812 981 150 696 564 272 258 647 509 88 703 669 375 551 936 592 569
952 800 584 643 368 489 328 313 592 388 543 649 979 997 814 79 208 998 629 847 704 997 253 715 430 415 538 700 4 494 100 864 693 416 296 285 620 78 351 540
646 169 527 289 796 801 720 758 745 92 989 271 853 788 531 222 461 241 358 332 684 740 446 311 743 557 479 557 925 796 357 891 666 514 557 870 853 440 61 678
396 9 17 170 291 380 536 185 917 539 983 887 54 612 951 479 151 7 641 335 730 95 728 280 395 688 911 476 815 729 265 127 236 214 180 6 503 596 173 643
346 599 68 849 658 619 121 131 828 667 433 487 753 125 626 14 10 403 106 703 818 964 406 874 856 86 60 660 667 153 121 98 412 236 12 423 965 216 621 361
921 715 647 299 886 682 36 493 551 537 969 643 434 415 303 438 860 203 478 988 675 719 990 338 450 633 155 646 452 427 509 988 426 12 483 142 339 390 50 171
601 105 968 121 879 81 870 600 603 871 887 610 404 234 745 526 275 441 226 752 943 726 709 201 54 758 53 397 41 141 416 747 219 478 770 180 482 691 725 173
186 914 1 963 247 464 362 521 233 120 40 779 195 161 743 439 355 403 141 633
"""

_VERIFY_TEXT = """
495 1168 565 1176 1114 922 196 1102 800 945 831 578 1270 1483 1290 922 973 993 866 942
926 750 1360 1586 1300 828 1571 940 746 1196 1186 1078 291 983 1428 981 1062 1593 787 650
1219 1029 921 1587 1270 730 1241 1139 1525 1373 738 1609 1545 1347 1463 736 389 1109 1488 912
992 1346 394 1620 1316 679 1114 1679 765 735 578 1363 1096 638 740 1006 1296 395 575 1477
934 288 1142 895 1185 1152 1175 1036 1112 450 1573 333 1838 1191 877 739 1020 1149 1133 587
1462 1338 589 344 868 1498 1412 1356 1478 1227 1005 1843 953 533 606 956 948 881 648 1292
778 289 825 1141 1110 724 986 697 1882 886 1791 1769 591 1558 1652 835 718 898 663 903
1395 518 1162 438 397 772 1158 525 1250 1521 1134 613 650 583 728 524 1391 1278 457 907
845 889 965 1064 1389 1307 372 917 1383 969 961 1031 1075 1072 913 838 314 1191 839 1662
1184 1686 700 1849 1509 834 151 1038 772 255 502 749 1237 1076 368 571 1019 356 1576 704
1454 1472 1168 1136 1478 695 209 556 672 670 1727 1015 1385 454 432 548 1707 640 733 1257
1084 1347 1389 887 1203 1197 326 665 1179 928 1286 1031 1179 93 685 995 492 1150 407 1114
1523 433 1464 563 1395 722 1146 1386 716 1713 1794 885 641 266 1529 1091 632 1244 1045 1503
1223 811 1167 655 764 1217 94 650 418 649 1116 1607 699 1219 1269 889 531 1062 1598 1118
1178 1440 722 1398 479 961 1059 551 581 370 390 1029 768 945 1492 941 1178 1229 311 793
"""


def _numbers(text: str) -> tuple[int, ...]:
    values = tuple(int(token) for token in text.split())
    if len(values) != DATA_SIZE:
        raise ValueError(f"expected {DATA_SIZE} values, found {len(values)}")
    return values


_INPUT1 = _numbers(_INPUT1_TEXT)
_INPUT2 = _numbers(_INPUT2_TEXT)
_VERIFY = _numbers(_VERIFY_TEXT)


@dataclass(frozen=True)
class Dataset:
    """Two input vectors and the expected element-wise sum."""

    input1: tuple[int, ...]
    input2: tuple[int, ...]
    verify: tuple[int, ...]

    def __len__(self) -> int:
        return len(self.verify)


def dataset() -> Dataset:
    """The reference dataset of ``DATA_SIZE`` elements."""
    return Dataset(_INPUT1, _INPUT2, _VERIFY)