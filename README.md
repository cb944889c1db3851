# linepad

A small, menu-driven line editor for the terminal. A document is an ordered
list of lines. You can insert lines into it, delete them, edit them, display
them, search them, save them to a text file and load them from one.

## Installing

    pip install .

## Running

    linepad

The command takes no options besides `--help`. It shows a menu and reads
your choice from standard input:

    --- Simple Text Editor ---
    1. Insert Line
    2. Delete Line
    3. Edit Line
    4. Display Document
    5. Search Word
    6. Save to File
    7. Load from File
    8. Exit

- **Insert Line** puts new text *before* the line number you choose. Any
  number from 1 up to one past the last line is accepted. In an empty
  document the text becomes the first line without asking for a number.
- **Delete Line** and **Edit Line** take the number of an existing line.
- **Display Document** prints every line as `number: text`.
- **Search Word** lists every line that contains the text you enter,
  anywhere in the line. If no line contains it, it prints `No found lines`.
- **Save to File** writes each line to the named file, followed by a space
  and a newline.
- **Load from File** inserts the file's lines at the start of the current
  document, ahead of any lines already there. A file that cannot be opened
  is reported as `File does not exist.`

An invalid menu choice or line number is asked for again. The session ends
when you choose 8 or when input runs out.

## Using it from Python

`linepad.document.Document` holds the lines and addresses them by 1-based
line numbers:

```python
from linepad.document import Document

doc = Document()
doc.insert_line("hello world", 1)
doc.insert_line("first", 1)
doc.edit_line(2, "hello there")

for number, text in doc.numbered_lines():
    print(number, text)

print(len(doc))              # 2
print(list(doc))             # ['first', 'hello there']
print(doc.search("there"))   # [(2, 'hello there')]
doc.save("notes.txt")
```

- `insert_line(text, position)` accepts positions from 1 to one past the
  last line. `delete_line(position)` and `edit_line(position, new_text)`
  accept only existing lines. A position out of range raises `IndexError`.
- `search(word)` returns a list of `(line_number, text)` pairs.
- `load(filename)` inserts the file's lines at the top and returns how many
  were read. It raises `OSError` (for example `FileNotFoundError`) if the
  file cannot be opened.

`linepad.editor.TextEditor` runs the same interactive session over any pair
of text streams, so it can be driven from a script:

```python
import io
from linepad.editor import TextEditor

out = io.StringIO()
TextEditor(io.StringIO("1\nhello\n4\n8\n"), out).start()
print(out.getvalue())
```

The document being edited is available as `TextEditor.document`, and the
last file name entered as `TextEditor.file_name`.

## What it does not do

linepad works on whole lines only. It has no full-screen view and no cursor
movement. It has no undo. It has no editing within a line other than
replacing the whole line. Saving does not remember or reuse the file it
loaded from; it asks for a file name each time.

## Tests

    pip install .[test]
    pytest