from multispinbox.view.widgets.line_edit_buffer import LineEditTextBuffer
from multispinbox.view.widgets.multi_spin_box import MultiSpinBox
