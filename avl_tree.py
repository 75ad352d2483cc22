import sys
from collections.abc import Collection, Iterable, Iterator
from typing import cast, IO, Optional


class WordNode:
    __slots__ = '_word', 'left', 'right', 'parent', 'height'

    def __init__(self, word: str, parent: 'Optional[WordNode]' = None):
        self._word = word
        self.left: 'None | WordNode' = None
        self.right: 'None | WordNode' = None
        # only None for the root
        self.parent: 'None | WordNode' = parent
        # height is max child edge count for any path; 0 if no children
        self.height: int = 0

    @property
    def word(self) -> str:
        return self._word

    def __str__(self):
        return f'{self._word}({self.height})'

    def __repr__(self):
        return f'{self.__class__.__name__}({self._word!r})'

    def __iter__(self) -> Iterator['WordNode']:
        stack: 'list[WordNode]' = [self]
        while stack:
            node = stack.pop()
            yield node
            # push right first so the left subtree comes out first
            stack.extend(reversed(node.get_children()))

    def get_children(self) -> tuple['WordNode', ...]:
        """Get a tuple of this node's children. May have 0, 1, or 2 elements. If it has 2 children, the returned order
        will always be (left, right).
        """
        return tuple(i for i in [self.left, self.right] if i is not None)

    def sorted(self) -> Iterator['WordNode']:
        """Return an iterator over the nodes rooted here in ascending word order."""
        stack: 'list[WordNode]' = []
        node: 'None | WordNode' = self
        while stack or node is not None:
            # go as far left as possible, then visit, then switch to the right subtree
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node
            node = node.right

    def _calculate_height(self) -> int:
        """Returns max depth of descendents of this node as the number of child edges. This calculates it manually and
        does not use the height field and should only be used for testing since it requires walking the tree.
        """
        depth = 0
        next_level = list(self.get_children())
        while next_level:
            depth += 1
            next_level = [n for node in next_level for n in node.get_children()]
        return depth

    def _calculate_balance(self) -> int:
        """Calculate the balance of this node (right height - left height) manually, not checking the height field.
        This should only be used for testing since it requires walking the tree.
        """
        return (self.right._calculate_height() if self.right is not None else -1) - (self.left._calculate_height() if self.left is not None else -1)

    def _calculate_len(self) -> int:
        """Calculate the number of words rooted at this node manually. This should only be used for testing."""
        return sum(1 for _ in self)


class AvlTree(Collection):
    """AVL tree of unique words. Nodes keep a parent link so rotations and rebalancing can walk back up the tree."""
    __slots__ = ('root', '_size')

    INDENT = ' ' * 8

    def __init__(self, init: Optional[Iterable[str]] = None):
        """Initialize the tree, optionally with an iterable of words to initially insert."""
        self.root: 'None | WordNode' = None
        self._size = 0
        if init:
            self.extend(init)

    def __len__(self):
        return self._size

    def __iter__(self):
        if self.root is not None:
            for node in self.root:
                yield node.word

    def __contains__(self, word):
        return self.search(word) is not None

    def __eq__(self, other):
        """Trees are equal if they hold the same words (need not have the same tree structure)."""
        if not isinstance(other, AvlTree):
            return False
        return len(self) == len(other) and list(self.sorted()) == list(other.sorted())

    def __str__(self):
        return f'{self.__class__.__name__}({str(list(self.sorted()))})'

    def __repr__(self):
        return str(self)

    def size(self) -> int:
        """Number of distinct words in the tree."""
        return self._size

    def clear(self):
        """Removes all words from the tree."""
        self.root = None
        self._size = 0

    def sorted(self) -> Iterator[str]:
        """Return a sorted iterator over the words in the tree."""
        if self.root is not None:
            for node in self.root.sorted():
                yield node.word

    def extend(self, words: Iterable[str]) -> int:
        """Add an iterable of words to the tree. Returns the number of words inserted."""
        inserted = 0
        for word in words:
            inserted += int(self.insert(word))
        return inserted

    def _find(self, word: str) -> tuple['WordNode | None', 'WordNode | None']:
        """Return (node, parent), where node is the node holding word (or None if absent), and parent is the parent of
        the found node, the last node visited by an unsuccessful search, or None if the tree is empty.
        """
        node = self.root
        parent_node = None
        while node is not None:
            if word == node.word:
                return (node, node.parent)
            parent_node = node
            # lesser words are always in the left subtree, greater words in the right subtree
            node = node.left if word < node.word else node.right
        return (None, parent_node)

    def search(self, word: str) -> 'WordNode | None':
        """Return the node holding word, or None if it is not in the tree."""
        return self._find(word)[0]

    def _attach(self, word: str) -> 'WordNode | None':
        """Hang a new leaf for word at the slot a search ends on. Return the new node, or None if word is present."""
        assert(word is not None)
        if self.root is None:
            self.root = WordNode(word)
            self._size = 1
            return self.root
        node, parent_node = self._find(word)
        if node is not None:
            return None
        # the tree is not empty, so an unsuccessful search always ends on a node
        parent_node = cast(WordNode, parent_node)
        node = WordNode(word, parent_node)
        # the slot found by the search is guaranteed to be empty
        if word < parent_node.word:
            parent_node.left = node
        else:
            parent_node.right = node
        self._size += 1
        return node

    def bst_insert(self, word: str) -> bool:
        """Insert word as in a plain binary search tree, ignoring balance and leaving heights untouched. Return True if
        the word was inserted, False if it was already present.
        """
        return self._attach(word) is not None

    def avl_insert(self, word: str) -> bool:
        """Insert word, keeping the tree AVL balanced. Assumes every earlier change was made by avl_insert or remove.
        Return True if the word was inserted, False if it was already present.
        """
        node = self._attach(word)
        if node is None:
            return False
        # the new leaf is balanced with height 0, so start at its parent
        self._retrace(node.parent)
        return True

    def insert(self, word: str) -> bool:
        """Insert a word into the tree. Return True if the word was inserted, False if it was already present."""
        return self.avl_insert(word)

    def _replace(self, old: WordNode, new: 'WordNode | None'):
        """Put new in the slot old occupies under old's parent (or at the root)."""
        p = old.parent
        if new is not None:
            new.parent = p
        if p is None:
            self.root = new
        elif p.left is old:
            p.left = new
        elif p.right is old:
            p.right = new
        else:
            raise RuntimeError('Replaced child does not exist in parent')

    def left_rotate(self, x: WordNode) -> WordNode:
        """Rotate on the edge from x to its right child. x must have a right child.

        Returns the new root of this subtree (the former right child).
        """
        #    *x                  y
        #   a   y      =>     *x   c
        #      b c            a b
        # changed height: x, then y
        y = cast(WordNode, x.right)
        x.right = y.left
        if y.left is not None:
            y.left.parent = x
        self._replace(x, y)
        y.left = x
        x.parent = y
        # x is now below y, so it goes first
        x.height = self.get_height(x)
        y.height = self.get_height(y)
        return y

    def right_rotate(self, y: WordNode) -> WordNode:
        """Rotate on the edge from y to its left child. y must have a left child.

        Returns the new root of this subtree (the former left child).
        """
        #      *y              x
        #     x   c    =>    a  *y
        #    a b               b c
        # changed height: y, then x
        x = cast(WordNode, y.left)
        y.left = x.right
        if x.right is not None:
            x.right.parent = y
        self._replace(y, x)
        x.right = y
        y.parent = x
        y.height = self.get_height(y)
        x.height = self.get_height(x)
        return x

    def rebalance(self, n: WordNode) -> WordNode:
        """Fix the balance at n if there is any balance to fix. None of n's descendants may violate the AVL property,
        and their heights must be accurate.

        Return the node now in n's position (n itself if no rotation occured).
        """
        balance = self.get_balance(n)
        if balance > 1:
            # right heavy; a right child exists since its height is at least 1
            if self.get_balance(n.right) < 0:
                # right left heavy
                self.right_rotate(cast(WordNode, n.right))
            return self.left_rotate(n)
        elif balance < -1:
            # left heavy
            if self.get_balance(n.left) > 0:
                # left right heavy
                self.left_rotate(cast(WordNode, n.left))
            return self.right_rotate(n)
        return n

    def _retrace(self, node: 'WordNode | None'):
        """Recompute the height of node and then rebalance it, for every node from node up to the root."""
        while node is not None:
            # update height first so the balance check sees the right height
            node.height = self.get_height(node)
            # continue from whichever node now holds this position
            node = self.rebalance(node).parent

    def get_height(self, n: 'WordNode | None') -> int:
        """Height of n from its children's cached heights; -1 for a missing node."""
        if n is None:
            return -1
        return 1 + max(n.left.height if n.left is not None else -1, n.right.height if n.right is not None else -1)

    def get_balance(self, n: 'WordNode | None') -> int:
        """Right height - left height. A balanced node has -1, 0 or 1; a missing node counts as balanced."""
        if n is None:
            return 0
        return self.get_height(n.right) - self.get_height(n.left)

    def remove(self, word: str) -> bool:
        """Remove a word from the tree, keeping it AVL balanced. Return True if the word was removed, False if it was
        not present.
        """
        node = self.search(word)
        if node is None:
            return False
        if node.left is not None and node.right is not None:
            # the predecessor has no right child, so it can be spliced out and then take node's place
            pred = node.left
            while pred.right is not None:
                pred = pred.right
            # lowest node whose subtree changes; if pred is node's own left child, that is pred in its new position
            start = pred if pred.parent is node else pred.parent
            self._replace(pred, pred.left)
            pred.left = node.left
            if pred.left is not None:
                pred.left.parent = pred
            pred.right = node.right
            cast(WordNode, pred.right).parent = pred
            self._replace(node, pred)
        else:
            start = node.parent
            self._replace(node, node.left if node.left is not None else node.right)
        node.left = node.right = node.parent = None
        self._size -= 1
        # removal can need a rotation at more than one level, so every ancestor is checked
        self._retrace(start)
        return True

    def print_tree(self, file: Optional[IO[str]] = None):
        """Print a sideways representation of the tree: root at the left, right subtree above, left subtree below.
        Each line is the node's word and height, indented by its depth.
        """
        out = file if file is not None else sys.stdout
        # reverse in-order walk; each entry is (node, depth)
        stack: 'list[tuple[WordNode, int]]' = []
        node = self.root
        depth = 0
        while stack or node is not None:
            while node is not None:
                stack.append((node, depth))
                node = node.right
                depth += 1
            node, depth = stack.pop()
            print(f'{self.INDENT * depth}{node}', file=out)
            node = node.left
            depth += 1

    @staticmethod
    def test(iters=1, iters_per_iter=1000, remove_prob=.1, print_time=True, print_tree=False):
        """Run tests. Will throw an AssertionError if there is an error."""
        import random
        import string
        import time
        start_time = time.time()
        for _ in range(iters):
            words: set[str] = set()
            tree = AvlTree()
            # the tree should start out empty
            assert(len(tree) == 0)
            assert(tree.root is None)
            # insert and remove a group of words, adding them both to the tree and to a set
            for _ in range(iters_per_iter):
                remove = random.random() <= remove_prob
                if remove:
                    if len(words) > 0:
                        # making a random choice from a set is a O(N) operation, but for a test, it's fine
                        word = random.choice(tuple(words))
                        assert(tree.remove(word))
                        words.remove(word)
                else:
                    word = ''.join(random.choices(string.ascii_lowercase, k=random.randint(1, 4)))
                    already_exists = word in words
                    assert(tree.insert(word) != already_exists)
                    words.add(word)
            assert(len(tree) == len(words))
            assert(list(tree.sorted()) == sorted(words))
            none_parent_count = 0
            for el in (tree.root if tree.root is not None else ()):
                # the balance from heights and the calculated balance should match and be -1, 0, or 1
                # the parent should also have that node as one of its children
                balance = tree.get_balance(el)
                assert(balance == el._calculate_balance())
                assert(abs(balance) <= 1)
                assert(el.height == el._calculate_height())
                if el.parent is None:
                    none_parent_count += 1
                else:
                    assert(el.parent.left is el or el.parent.right is el)
                for child in el.get_children():
                    assert(child.parent is el)
            assert(none_parent_count == 1 or (len(tree) == 0 and tree.root is None))
            if print_tree:
                tree.print_tree()
            for word in words:
                # the word should not be inserted again, should be found, and should be removable
                assert(not tree.insert(word))
                assert(word in tree)
                assert(cast(WordNode, tree.search(word)).word == word)
                assert(tree.remove(word))
            # after removing everything, the tree should be empty
            assert(len(tree) == 0)
            assert(tree.root is None)
            assert(list(tree) == [])
        end_time = time.time()
        total_time = end_time - start_time
        if print_time:
            print(f'Test successful with {iters} iterations and {iters_per_iter} steps per iteration')
            print(f'Total time of {total_time:.2f}s and average time of {(total_time / iters):.2f}s per iteration')


if __name__ == '__main__':
    AvlTree.test()
