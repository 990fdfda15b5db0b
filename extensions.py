from back_mark import BackMark

back_marks = BackMark()
